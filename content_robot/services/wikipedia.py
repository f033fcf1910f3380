"""
Wikipedia article retrieval.

Fetches the plain-text extract of the article matching a search term
from the MediaWiki query API. Section headings come back as
``== Heading ==`` lines, which the sanitizer drops.
"""

from typing import Any, Optional

import httpx

from content_robot.services.base import ArticleRetriever
from content_robot.utils.errors import RetrievalError
from content_robot.utils.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = "content-robot/0.1 (text pipeline)"


class WikipediaRetriever(ArticleRetriever):
    """Retrieve article text from Wikipedia."""

    def __init__(
        self,
        api_url: str = "https://en.wikipedia.org/w/api.php",
        timeout: float = 300.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the retriever.

        Args:
            api_url: MediaWiki API endpoint
            timeout: Request timeout in seconds
            client: Optional shared HTTP client (not closed by the retriever)
        """
        self.api_url = api_url
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )

    async def fetch(self, search_term: str) -> str:
        """Return the plain-text article for ``search_term``."""
        if not search_term or not search_term.strip():
            raise RetrievalError(search_term, "empty search term")

        params = {
            "action": "query",
            "prop": "extracts",
            "explaintext": 1,
            "redirects": 1,
            "format": "json",
            "formatversion": 2,
            "titles": search_term,
        }

        logger.info(f"Fetching Wikipedia content for '{search_term}'")

        try:
            response = await self.client.get(self.api_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                search_term,
                f"HTTP {e.response.status_code}",
                {"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise RetrievalError(search_term, f"request failed: {e}") from e
        except ValueError as e:
            raise RetrievalError(search_term, "response was not valid JSON") from e

        content = self._extract_content(payload)
        if content is None or not content.strip():
            raise RetrievalError(search_term, "no article content found")

        logger.debug(f"Fetched {len(content)} characters for '{search_term}'")
        return content

    @staticmethod
    def _extract_content(payload: Any) -> Optional[str]:
        """Pull the extract text out of a query response."""
        if not isinstance(payload, dict):
            return None

        query = payload.get("query")
        if not isinstance(query, dict):
            return None

        pages = query.get("pages", [])
        # formatversion=1 returns pages keyed by page id
        if isinstance(pages, dict):
            pages = list(pages.values())
        elif not isinstance(pages, list):
            return None

        for page in pages:
            if not isinstance(page, dict) or "missing" in page or "invalid" in page:
                continue
            extract = page.get("extract")
            if isinstance(extract, str):
                return extract

        return None

    async def aclose(self) -> None:
        """Close the HTTP client if this retriever created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "WikipediaRetriever":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

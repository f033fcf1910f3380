"""
Keyword extraction with IBM Watson Natural Language Understanding.

Calls the NLU ``analyze`` endpoint with only the keywords feature
enabled and returns the keyword entries in response order.
"""

from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from content_robot.models import KeywordEntry
from content_robot.services.base import KeywordAnalyzer
from content_robot.utils.errors import AnalysisError
from content_robot.utils.logging import get_logger

logger = get_logger(__name__)


class WatsonKeywordAnalyzer(KeywordAnalyzer):
    """Keyword analyzer backed by Watson NLU."""

    def __init__(
        self,
        apikey: str,
        service_url: str,
        version: str = "2021-08-01",
        timeout: float = 300.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            apikey: IAM API key for the NLU instance
            service_url: Instance URL from the service credentials
            version: API version date
            timeout: Request timeout in seconds
            client: Optional shared HTTP client (not closed by the analyzer)
        """
        self.endpoint = f"{service_url.rstrip('/')}/v1/analyze"
        self.version = version
        self._auth = httpx.BasicAuth("apikey", apikey)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def analyze_keywords(self, text: str) -> List[KeywordEntry]:
        """Return the keywords Watson finds in ``text``."""
        payload = {
            "text": text,
            "features": {"keywords": {}},
        }

        try:
            response = await self.client.post(
                self.endpoint,
                params={"version": self.version},
                json=payload,
                auth=self._auth,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise AnalysisError(
                f"Watson NLU returned HTTP {e.response.status_code}",
                {"status_code": e.response.status_code, "error": self._error_message(e.response)},
            ) from e
        except httpx.HTTPError as e:
            raise AnalysisError(f"Watson NLU request failed: {e}") from e
        except ValueError as e:
            raise AnalysisError("Watson NLU response was not valid JSON") from e

        return self._parse_keywords(body)

    @staticmethod
    def _parse_keywords(body: Any) -> List[KeywordEntry]:
        if not isinstance(body, dict) or not isinstance(body.get("keywords"), list):
            raise AnalysisError("Watson NLU response has no keywords list")

        try:
            return [KeywordEntry.model_validate(item) for item in body["keywords"]]
        except ValidationError as e:
            raise AnalysisError(
                "Watson NLU returned a malformed keyword entry",
                {"errors": e.error_count()},
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and "error" in body:
            return str(body["error"])
        return response.text

    async def aclose(self) -> None:
        """Close the HTTP client if this analyzer created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "WatsonKeywordAnalyzer":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

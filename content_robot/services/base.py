"""
Abstract interfaces for the text pipeline's external collaborators.

The pipeline only depends on these interfaces, so retrieval, keyword
analysis and state storage can be swapped for other providers or fakes.
"""

from abc import ABC, abstractmethod
from typing import List

from content_robot.models import ContentDocument, KeywordEntry


class ArticleRetriever(ABC):
    """Source of raw article text for a search term."""

    @abstractmethod
    async def fetch(self, search_term: str) -> str:
        """
        Fetch the article text for a search term.

        Raises:
            RetrievalError: If the term yields no content or the call fails
        """
        pass


class KeywordAnalyzer(ABC):
    """NLP service that extracts keywords from a span of text."""

    @abstractmethod
    async def analyze_keywords(self, text: str) -> List[KeywordEntry]:
        """
        Extract keywords from text, in service response order.

        An empty list is a valid result.

        Raises:
            AnalysisError: If the call fails or the response is malformed
        """
        pass


class StateStore(ABC):
    """Persistence for the shared content document."""

    @abstractmethod
    def load(self) -> ContentDocument:
        """
        Load the current content document.

        Raises:
            PersistenceError: On I/O or decoding failure
        """
        pass

    @abstractmethod
    def save(self, document: ContentDocument) -> None:
        """
        Persist the content document.

        Raises:
            PersistenceError: On I/O failure
        """
        pass

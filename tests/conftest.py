"""
Shared fixtures for the content robot tests.
"""

from typing import Dict, List, Optional, Set

import pytest

from content_robot.config import reset_settings
from content_robot.enrichment.keywords import KeywordEnricher
from content_robot.models import ContentDocument, KeywordEntry
from content_robot.pipeline import TextRobot
from content_robot.services.base import ArticleRetriever, KeywordAnalyzer, StateStore
from content_robot.utils.errors import AnalysisError, PersistenceError, RetrievalError


SAMPLE_ARTICLE = "Cats (Felis catus) are mammals.\n\n=References\nCats purr."


class FakeRetriever(ArticleRetriever):
    """Returns canned article text, or fails."""

    def __init__(self, content: Optional[str] = SAMPLE_ARTICLE, fail: bool = False) -> None:
        self.content = content
        self.fail = fail
        self.calls: List[str] = []

    async def fetch(self, search_term: str) -> str:
        self.calls.append(search_term)
        if self.fail or self.content is None:
            raise RetrievalError(search_term, "no article content found")
        return self.content


class FakeKeywordAnalyzer(KeywordAnalyzer):
    """Returns canned keywords per sentence; texts in ``failing`` raise AnalysisError."""

    def __init__(
        self,
        keywords: Optional[Dict[str, List[str]]] = None,
        default: Optional[List[str]] = None,
        failing: Optional[Set[str]] = None,
    ) -> None:
        self.keywords = keywords or {}
        self.default = default if default is not None else ["keyword"]
        self.failing = failing or set()
        self.calls: List[str] = []

    async def analyze_keywords(self, text: str) -> List[KeywordEntry]:
        self.calls.append(text)
        if text in self.failing:
            raise AnalysisError("Watson NLU returned HTTP 500", {"status_code": 500})
        terms = self.keywords.get(text, self.default)
        return [KeywordEntry(text=term) for term in terms]


class MemoryStateStore(StateStore):
    """Keeps the state document in memory as its serialized form."""

    def __init__(
        self,
        document: Optional[ContentDocument] = None,
        fail_load: bool = False,
        fail_save: bool = False,
    ) -> None:
        self.state = document.to_state() if document else None
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saves = 0

    def load(self) -> ContentDocument:
        if self.fail_load or self.state is None:
            raise PersistenceError("load", "memory", "no document")
        return ContentDocument.model_validate(self.state)

    def save(self, document: ContentDocument) -> None:
        if self.fail_save:
            raise PersistenceError("save", "memory", "disk full")
        self.saves += 1
        self.state = document.to_state()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the developer's environment."""
    for name in (
        "LOG_LEVEL",
        "STATE_FILE_PATH",
        "MAXIMUM_SENTENCES",
        "WATSON_NLU_APIKEY",
        "WATSON_NLU_URL",
        "WATSON_NLU_VERSION",
        "WIKIPEDIA_LANGUAGE",
        "REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def document():
    """A freshly initialized content document."""
    return ContentDocument(search_term="Cat", maximum_sentences=1)


@pytest.fixture
def retriever():
    return FakeRetriever()


@pytest.fixture
def analyzer():
    return FakeKeywordAnalyzer(default=["cats", "mammals"])


@pytest.fixture
def state_store(document):
    return MemoryStateStore(document)


@pytest.fixture
def robot(state_store, retriever, analyzer):
    return TextRobot(
        state_store=state_store,
        retriever=retriever,
        enricher=KeywordEnricher(analyzer),
    )

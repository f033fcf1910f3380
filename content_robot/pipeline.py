"""
Text pipeline orchestration.

This module runs the text stage of the content pipeline: it loads the
shared content document, fetches the source article for its search term,
sanitizes and segments the text, caps the number of sentences, enriches
each sentence with keywords and saves the document back.
"""

from typing import Any, Optional

from content_robot.config import Settings, get_settings
from content_robot.enrichment.keywords import KeywordEnricher
from content_robot.models import ContentDocument, EnrichmentReport
from content_robot.services.base import ArticleRetriever, StateStore
from content_robot.services.watson import WatsonKeywordAnalyzer
from content_robot.services.wikipedia import WikipediaRetriever
from content_robot.state.store import JsonStateStore
from content_robot.text_processor.sanitizer import TextSanitizer
from content_robot.text_processor.segmenter import SentenceSegmenter, limit_sentences
from content_robot.utils.errors import MissingConfigurationError
from content_robot.utils.logging import LogContext, get_logger, log_performance

logger = get_logger(__name__)


class TextRobot:
    """
    Orchestrates the text stage.

    Stages run strictly one after another on a single document. Failures
    to load, fetch or save propagate to the caller and nothing is saved;
    keyword failures are isolated per sentence by the enricher.
    """

    def __init__(
        self,
        state_store: StateStore,
        retriever: ArticleRetriever,
        enricher: KeywordEnricher,
        sanitizer: Optional[TextSanitizer] = None,
        segmenter: Optional[SentenceSegmenter] = None,
    ) -> None:
        self.state_store = state_store
        self.retriever = retriever
        self.enricher = enricher
        self.sanitizer = sanitizer or TextSanitizer()
        self.segmenter = segmenter or SentenceSegmenter()

    @log_performance
    async def run(self) -> EnrichmentReport:
        """
        Run the whole text stage once.

        Returns:
            The enrichment report for this run

        Raises:
            PersistenceError: If the document cannot be loaded or saved
            RetrievalError: If the source article cannot be fetched
        """
        document = self.state_store.load()

        with LogContext(search_term=document.search_term):
            document = await self.fetch_content(document)
            document = self.sanitize_content(document)
            document = self.break_content_into_sentences(document)
            document = self.limit_maximum_sentences(document)
            document, report = await self.fetch_keywords_of_all_sentences(document)

            self.state_store.save(document)

        logger.info(
            f"Text stage finished for '{document.search_term}': "
            f"{report.enriched}/{report.total} sentences enriched"
        )
        return report

    async def fetch_content(self, document: ContentDocument) -> ContentDocument:
        document.source_content_original = await self.retriever.fetch(document.search_term)
        return document

    def sanitize_content(self, document: ContentDocument) -> ContentDocument:
        document.source_content_sanitized = self.sanitizer.sanitize(
            document.source_content_original or ""
        )
        return document

    def break_content_into_sentences(self, document: ContentDocument) -> ContentDocument:
        document.sentences = self.segmenter.segment(document.source_content_sanitized or "")
        logger.info(f"Found {len(document.sentences)} sentences")
        return document

    def limit_maximum_sentences(self, document: ContentDocument) -> ContentDocument:
        document.sentences = limit_sentences(document.sentences, document.maximum_sentences)
        return document

    async def fetch_keywords_of_all_sentences(
        self, document: ContentDocument
    ) -> tuple[ContentDocument, EnrichmentReport]:
        report = await self.enricher.enrich(document.sentences)
        return document, report

    async def aclose(self) -> None:
        """Close collaborators that hold network clients."""
        for collaborator in (self.retriever, self.enricher.analyzer):
            close = getattr(collaborator, "aclose", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> "TextRobot":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_text_robot(
    settings: Optional[Settings] = None,
    state_store: Optional[StateStore] = None,
) -> TextRobot:
    """
    Create a text robot with the default collaborators.

    Args:
        settings: Settings to build from (defaults to the global settings)
        state_store: Optional store to use instead of the JSON file store

    Returns:
        Configured text robot

    Raises:
        MissingConfigurationError: If Watson NLU credentials are not set
    """
    settings = settings or get_settings()

    if not settings.watson_nlu_apikey:
        raise MissingConfigurationError("WATSON_NLU_APIKEY")
    if not settings.watson_nlu_url:
        raise MissingConfigurationError("WATSON_NLU_URL")

    analyzer = WatsonKeywordAnalyzer(
        apikey=settings.watson_nlu_apikey,
        service_url=settings.watson_nlu_url,
        version=settings.watson_nlu_version,
        timeout=settings.request_timeout,
    )
    retriever = WikipediaRetriever(
        api_url=settings.wikipedia_endpoint,
        timeout=settings.request_timeout,
    )

    return TextRobot(
        state_store=state_store or JsonStateStore(settings.state_file_path),
        retriever=retriever,
        enricher=KeywordEnricher(analyzer),
    )

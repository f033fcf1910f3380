"""
Keyword enrichment for segmented sentences.

Each sentence is sent to the keyword analyzer in document order, one call
at a time. A failed call leaves that sentence with no keywords and is
recorded in the returned report; it never stops the remaining sentences.
"""

from typing import List

from content_robot.models import EnrichmentFailure, EnrichmentReport, Sentence
from content_robot.services.base import KeywordAnalyzer
from content_robot.utils.errors import AnalysisError
from content_robot.utils.logging import get_logger, log_performance

logger = get_logger(__name__)


class KeywordEnricher:
    """Attach keyword terms to sentences using a keyword analyzer."""

    def __init__(self, analyzer: KeywordAnalyzer) -> None:
        self.analyzer = analyzer

    async def fetch_keywords(self, text: str) -> List[str]:
        """Return the keyword terms for one span of text."""
        entries = await self.analyzer.analyze_keywords(text)
        return [entry.text for entry in entries]

    @log_performance
    async def enrich(self, sentences: List[Sentence]) -> EnrichmentReport:
        """
        Populate ``keywords`` on every sentence, in place.

        Args:
            sentences: Sentences to enrich, in document order

        Returns:
            Report with the number of enriched sentences and one entry per
            sentence whose lookup failed
        """
        report = EnrichmentReport(total=len(sentences))

        for index, sentence in enumerate(sentences):
            try:
                keywords = await self.fetch_keywords(sentence.text)
            except AnalysisError as e:
                logger.warning(
                    f"Keyword extraction failed for sentence {index}: {e}",
                    extra={"sentence_index": index},
                )
                sentence.keywords = []
                report.failures.append(
                    EnrichmentFailure(index=index, text=sentence.text, error=str(e))
                )
                continue

            sentence.keywords = keywords
            report.enriched += 1
            logger.debug(f"Sentence {index}: {len(keywords)} keywords")

        if report.failures:
            logger.warning(
                f"Keyword extraction failed for {report.failed} of {report.total} sentences"
            )

        return report

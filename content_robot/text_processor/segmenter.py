"""
Sentence boundary detection and sentence limiting.

This module splits sanitized article text into Sentence records using
NLTK's Punkt tokenizer, which handles abbreviations, decimal numbers and
quoted punctuation, and truncates the result to the configured maximum.
"""

from typing import List, Optional

import nltk
from nltk.tokenize.punkt import PunktSentenceTokenizer, PunktTokenizer

from content_robot.models import Sentence
from content_robot.utils.logging import get_logger

logger = get_logger(__name__)

# Lowercase, without the final period, as Punkt stores them
COMMON_ABBREVIATIONS = frozenset(
    {
        "dr",
        "mr",
        "mrs",
        "ms",
        "prof",
        "st",
        "jr",
        "sr",
        "vs",
        "etc",
        "e.g",
        "i.e",
        "u.s",
    }
)


class SentenceSegmenter:
    """Split text into an ordered list of Sentence records."""

    def __init__(self, language: str = "english") -> None:
        """
        Initialize the segmenter.

        Args:
            language: Punkt model to load
        """
        self.language = language
        self._tokenizer: Optional[PunktSentenceTokenizer] = None

    @property
    def tokenizer(self) -> PunktSentenceTokenizer:
        """Punkt tokenizer, loaded on first use."""
        if self._tokenizer is None:
            self._tokenizer = self._load_tokenizer()
        return self._tokenizer

    def _ensure_nltk_data(self) -> None:
        """Download required NLTK data if not present."""
        try:
            nltk.data.find("tokenizers/punkt_tab")
        except LookupError:
            logger.info("Downloading NLTK punkt tokenizer...")
            nltk.download("punkt_tab", quiet=True)

    def _load_tokenizer(self) -> PunktSentenceTokenizer:
        self._ensure_nltk_data()

        try:
            tokenizer = PunktTokenizer(self.language)
        except LookupError:
            logger.warning(
                f"Punkt model '{self.language}' unavailable, "
                "falling back to the built-in abbreviation list"
            )
            tokenizer = PunktSentenceTokenizer()

        tokenizer._params.abbrev_types.update(COMMON_ABBREVIATIONS)
        return tokenizer

    def split_sentences(self, text: str) -> List[str]:
        """Split text into sentence strings."""
        if not text or not text.strip():
            return []

        sentences = self.tokenizer.tokenize(text)
        return [s.strip() for s in sentences if s.strip()]

    def segment(self, text: str) -> List[Sentence]:
        """
        Segment sanitized text into Sentence records.

        Args:
            text: Sanitized article text

        Returns:
            Sentences in reading order, each with empty keywords and images
        """
        sentences = [Sentence(text=s) for s in self.split_sentences(text)]
        logger.debug(f"Segmented text into {len(sentences)} sentences")
        return sentences


def limit_sentences(sentences: List[Sentence], maximum_sentences: int) -> List[Sentence]:
    """Keep the first ``maximum_sentences`` sentences; a negative bound keeps none."""
    return sentences[: max(maximum_sentences, 0)]

"""
Tests for sentence segmentation and sentence limiting.
"""

import logging
from unittest.mock import patch

import pytest

from content_robot.models import Sentence
from content_robot.text_processor.segmenter import (
    COMMON_ABBREVIATIONS,
    SentenceSegmenter,
    limit_sentences,
)


@pytest.fixture(scope="module")
def segmenter():
    """One segmenter for the module so the Punkt model loads once."""
    return SentenceSegmenter()


class TestSentenceSegmenter:
    """Test sentence boundary detection."""

    def test_simple_sentences(self, segmenter):
        sentences = segmenter.segment("Cats are mammals. Cats purr.")

        assert [s.text for s in sentences] == ["Cats are mammals.", "Cats purr."]

    def test_records_start_empty(self, segmenter):
        sentences = segmenter.segment("Cats are mammals. Cats purr.")

        for sentence in sentences:
            assert isinstance(sentence, Sentence)
            assert sentence.keywords == []
            assert sentence.images == []

    def test_empty_input(self, segmenter):
        assert segmenter.segment("") == []
        assert segmenter.segment("   ") == []

    def test_abbreviation_does_not_split(self, segmenter):
        text = "Dr. Smith studied cats for years. He wrote a book about them."
        assert segmenter.split_sentences(text) == [
            "Dr. Smith studied cats for years.",
            "He wrote a book about them.",
        ]

    def test_decimal_number_does_not_split(self, segmenter):
        text = "The average cat weighs 4.5 kilograms. Larger breeds weigh more."
        assert segmenter.split_sentences(text) == [
            "The average cat weighs 4.5 kilograms.",
            "Larger breeds weigh more.",
        ]

    def test_quoted_punctuation(self, segmenter):
        text = 'She said "cats are great." Then she left.'
        assert segmenter.split_sentences(text) == [
            'She said "cats are great."',
            "Then she left.",
        ]

    def test_question_and_exclamation(self, segmenter):
        text = "Do cats sleep a lot? Yes! They sleep most of the day."
        assert len(segmenter.split_sentences(text)) == 3

    def test_order_preserved(self, segmenter):
        text = " ".join(f"Sentence number {i} is here." for i in range(10))
        sentences = segmenter.segment(text)

        assert [s.text for s in sentences] == [
            f"Sentence number {i} is here." for i in range(10)
        ]


class TestFallbackTokenizer:
    """Test segmentation when the trained Punkt model cannot be loaded."""

    @pytest.fixture
    def fallback_segmenter(self):
        with patch.object(SentenceSegmenter, "_ensure_nltk_data"), patch(
            "content_robot.text_processor.segmenter.PunktTokenizer",
            side_effect=LookupError("punkt_tab"),
        ):
            yield SentenceSegmenter()

    def test_warning_logged(self, fallback_segmenter, caplog):
        with caplog.at_level(logging.WARNING):
            fallback_segmenter.tokenizer

        assert any(
            record.levelno == logging.WARNING and "falling back" in record.getMessage()
            for record in caplog.records
        )

    def test_abbreviations_seeded(self, fallback_segmenter):
        abbreviations = fallback_segmenter.tokenizer._params.abbrev_types

        assert COMMON_ABBREVIATIONS <= abbreviations

    def test_abbreviation_does_not_split(self, fallback_segmenter):
        text = "Dr. Smith studied cats for years. He wrote a book about them."
        assert fallback_segmenter.split_sentences(text) == [
            "Dr. Smith studied cats for years.",
            "He wrote a book about them.",
        ]

    def test_decimal_number_does_not_split(self, fallback_segmenter):
        text = "The average cat weighs 4.5 kilograms. Larger breeds weigh more."
        assert fallback_segmenter.split_sentences(text) == [
            "The average cat weighs 4.5 kilograms.",
            "Larger breeds weigh more.",
        ]

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("The answer was no. We left early.", ["The answer was no.", "We left early."]),
            ("He said no. Then he went home.", ["He said no.", "Then he went home."]),
        ],
    )
    def test_sentence_ending_in_no_splits(self, fallback_segmenter, text, expected):
        assert fallback_segmenter.split_sentences(text) == expected


class TestLimitSentences:
    """Test prefix truncation of sentence lists."""

    @pytest.fixture
    def sentences(self):
        return [Sentence(text=f"Sentence {i}.") for i in range(5)]

    @pytest.mark.parametrize("maximum", [0, 1, 3, 5, 10])
    def test_limit_is_prefix(self, sentences, maximum):
        limited = limit_sentences(sentences, maximum)

        assert len(limited) == min(len(sentences), maximum)
        assert limited == sentences[: len(limited)]

    def test_limit_keeps_same_records(self, sentences):
        limited = limit_sentences(sentences, 2)
        assert limited[0] is sentences[0]
        assert limited[1] is sentences[1]

    def test_zero_yields_empty(self, sentences):
        assert limit_sentences(sentences, 0) == []

    def test_empty_input(self):
        assert limit_sentences([], 3) == []

"""
Core data models for the content robot.

This module defines the Pydantic models passed through the text pipeline
and persisted in the shared state document.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# Base Models
# =============================================================================


class CamelModel(BaseModel):
    """Base model whose fields serialize under camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_state(self) -> dict[str, Any]:
        """Dump the model in the shape stored in the state file."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Content Models
# =============================================================================


class Sentence(CamelModel):
    """One segmented sentence with its derived keywords."""

    text: str = Field(..., description="Sentence text as segmented")
    keywords: List[str] = Field(
        default_factory=list,
        description="Keyword terms in service response order",
    )
    images: List[Any] = Field(
        default_factory=list,
        description="Reserved for the image stage",
    )


class ContentDocument(CamelModel):
    """
    The document threaded through every pipeline stage.

    Unknown keys written by other stages are kept so that load and save
    round-trip the shared state without losing data.
    """

    model_config = ConfigDict(extra="allow")

    search_term: str = Field(..., description="Term that selects the source article")
    maximum_sentences: int = Field(..., ge=0, description="Upper bound on sentences kept")
    source_content_original: Optional[str] = Field(
        None, description="Raw article text from the retrieval service"
    )
    source_content_sanitized: Optional[str] = Field(
        None, description="Article text after sanitizing"
    )
    sentences: List[Sentence] = Field(default_factory=list)


# =============================================================================
# Keyword Analysis Models
# =============================================================================


class KeywordEntry(BaseModel):
    """A single keyword returned by the keyword service."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., description="Keyword term")
    relevance: Optional[float] = Field(None, ge=0.0, le=1.0)


class EnrichmentFailure(BaseModel):
    """A sentence whose keyword lookup failed."""

    index: int = Field(..., ge=0, description="Position of the sentence in the document")
    text: str
    error: str


class EnrichmentReport(BaseModel):
    """Outcome of one enrichment pass over a document's sentences."""

    total: int = 0
    enriched: int = 0
    failures: List[EnrichmentFailure] = Field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> bool:
        """True when every sentence got a keyword response."""
        return not self.failures

"""
Data models for extracted reviews.

Everything here lives for a single page extraction and is never persisted.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from .config import NOT_AVAILABLE


class ReviewRecord(BaseModel):
    """
    One extracted review. Every field is always present, holding either a
    value from the page or its sentinel.
    """
    model_config = ConfigDict(frozen=True)

    rating: str = NOT_AVAILABLE     # Decimal numeral, e.g. "4.5"
    title: str = ""
    date: str = NOT_AVAILABLE       # Free text as shown on the page
    text: str = ""
    verified: bool = False


class FieldResult(BaseModel):
    """Outcome of a single field parser: a page value or the applied default."""
    model_config = ConfigDict(frozen=True)

    value: Any
    matched: bool = False

    @classmethod
    def found(cls, value) -> "FieldResult":
        return cls(value=value, matched=True)

    @classmethod
    def default(cls, value) -> "FieldResult":
        return cls(value=value, matched=False)


class NodeResult(BaseModel):
    """Outcome of extracting one review node."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    record: ReviewRecord | None = None
    skipped_reason: str | None = None   # "error" or "rejected"
    error: str | None = None

    @property
    def skipped(self) -> bool:
        return self.record is None


class ExpansionResult(BaseModel):
    """
    Outcome of the content expansion loop, including the review container
    nodes located after expansion finished.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    expanded: bool = False
    clicks: int = 0
    rounds: int = 0
    nodes: list[Any] = Field(default_factory=list)
    container_selector: str | None = None


class ExtractionReport(BaseModel):
    """Everything a single page extraction produced."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    strategy: str
    records: list[ReviewRecord] = Field(default_factory=list)
    skipped: int = 0
    expansion: ExpansionResult = Field(default_factory=ExpansionResult)

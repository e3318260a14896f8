"""Data models shared by the extractors, the aggregator, and the parser."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class TimingMatch:
    """Raw fields captured from one timing line of compiler output."""

    duration: str
    location: str
    signature: str


@dataclass(frozen=True)
class DecodedLocation:
    """File path and 1-based source position decoded from a location token."""

    file_path: str
    line: int
    column: int


class FunctionTimeRecord(BaseModel):
    """Compile time measured for a single function body."""

    file: str = Field(..., description="File URI of the source file declaring the function.")
    duration_ms: float = Field(..., ge=0.0, description="Milliseconds spent type-checking the body.")
    starting_line: int = Field(..., ge=1, description="1-based line where the function starts.")
    starting_column: int = Field(..., ge=1, description="1-based column where the function starts.")
    signature: str = Field(..., description="Function signature as printed by the compiler.")
    occurrences: int = Field(
        ...,
        ge=0,
        description="How many times the originating invocation appeared in the build log.",
    )

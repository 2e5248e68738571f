"""Output schemas for heading commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class HeadingEntry(BaseModel):
    level: int = Field(..., description="Number of leading '#' characters")
    text: str = Field(..., description="Heading text without markers")
    line_number: int = Field(..., description="0-based line index")


class MatchEntry(BaseModel):
    path: str = Field(..., description="Vault-relative document path")
    heading_text: str = Field(..., description="Matched heading text")
    link: str = Field(..., description="Wiki link rendered with the current link format")


class HeadingListOutput(BaseOutputSchema):
    """Output schema for heading list command."""

    path: str = Field(..., description="File that was scanned")
    headings: list[HeadingEntry] = Field(..., description="Headings in document order")
    count: int = Field(..., description="Number of headings")


class HeadingNearestOutput(BaseOutputSchema):
    """Output schema for heading nearest command."""

    path: str = Field(..., description="File that was scanned")
    line: int = Field(..., description="0-based cursor line")
    heading_text: str | None = Field(..., description="Nearest heading at or above the line, null if none")


class HeadingSearchOutput(BaseOutputSchema):
    """Output schema for heading search command."""

    query: str = Field(..., description="Lower-cased query")
    vault: str = Field(..., description="Vault directory that was searched")
    matches: list[MatchEntry] = Field(..., description="Matches in document then heading order")
    count: int = Field(..., description="Number of matches")


register_output_schema("heading", "list", HeadingListOutput)
register_output_schema("heading", "nearest", HeadingNearestOutput)
register_output_schema("heading", "search", HeadingSearchOutput)

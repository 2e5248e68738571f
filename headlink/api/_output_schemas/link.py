"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCopyOutput(BaseOutputSchema):
    """Output schema for link copy command."""

    path: str = Field(..., description="Document the cursor is in")
    line: int = Field(..., description="0-based cursor line")
    link: str | None = Field(..., description="Composed wiki link, null if none could be built")
    copied: bool = Field(..., description="Whether the link reached the clipboard")
    notices: list[str] = Field(..., description="User-facing notices raised by the flow")


class LinkInsertOutput(BaseOutputSchema):
    """Output schema for link insert command."""

    path: str = Field(..., description="Document that holds the selection")
    selection: str = Field(..., description="Selected text used as the initial query")
    candidates: int = Field(..., description="Number of matching headings")
    link: str | None = Field(..., description="Inserted wiki link, null if nothing was inserted")
    notices: list[str] = Field(..., description="User-facing notices raised by the flow")


register_output_schema("link", "copy", LinkCopyOutput)
register_output_schema("link", "insert", LinkInsertOutput)

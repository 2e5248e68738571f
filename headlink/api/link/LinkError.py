"""Link flow errors.

Every failure of the copy and search-select flows is one of these. Each
carries the message shown to the user.
"""


class LinkError(Exception):
    """Base class for link flow failures."""

    message = "Link creation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class NoHeadingFound(LinkError):
    message = "No heading found above the current cursor position."


class NoAssociatedFile(LinkError):
    message = "No file is associated with the current view."


class EmptySelection(LinkError):
    message = "Select some text to search headings."


class IncompleteMatchResult(LinkError):
    message = "Selected match is missing a path or heading."


class ClipboardWriteFailed(LinkError):
    message = "Failed to copy link to clipboard."

"""
Exceptions raised by the AAC board.

Lookups and mutations raise these; read-only queries never do.
"""
from typing import Optional


class AACError(Exception):
    """Base class for every board error."""
    pass


class InvalidArgumentError(AACError, ValueError):
    """Raised when an image id or text is missing, empty or not a string."""
    pass


class NotFoundError(AACError, KeyError):
    """Raised when an image (or category image) is not on the current page."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class NoCurrentCategoryError(AACError):
    """Raised when a category-level mutation runs with no category selected."""
    pass


class EmptyBoardError(AACError):
    """Raised when the cursor cannot be reset because there are no categories."""
    pass


class IOFailureError(AACError):
    """Raised when a board file cannot be read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MalformedLineError(AACError):
    """Raised when a board file line (or an item to be written) breaks the grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        super().__init__(message)
        self.line_number = line_number
        self.line = line

"""
Category: one named group of image -> spoken text mappings.

Items keep insertion order (dict order); adding an existing image id
overwrites its text in place.
"""
import logging
from typing import Dict, Iterator, List, Tuple

from .errors import InvalidArgumentError, NotFoundError
from .page import AACPage, UNNAMED_CATEGORY

logger = logging.getLogger(__name__)


def _require_text(value, what: str) -> str:
    """Reject None, non-strings and blank strings."""
    if value is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidArgumentError(f"{what} cannot be empty")
    return value


class Category(AACPage):
    """A single category page of the board."""

    def __init__(self, name: str, image_loc: str = ""):
        self.name = name
        self.image_loc = image_loc   # Shown for this category on the home page
        self._items: Dict[str, str] = {}

    def __repr__(self) -> str:
        return f"Category(name={self.name!r}, image_loc={self.image_loc!r}, items={len(self._items)})"

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return (
            self.name == other.name
            and self.image_loc == other.image_loc
            and self._items == other._items
        )

    def add_item(self, image_id: str, text: str) -> None:
        """Add or overwrite the text spoken for image_id."""
        _require_text(image_id, "Image location")
        _require_text(text, "Text")
        if image_id in self._items:
            logger.debug(f"Overwriting {image_id!r} in category {self.name!r}")
        self._items[image_id] = text

    def get_image_locs(self) -> List[str]:
        return list(self._items)

    def get_category(self) -> str:
        """Display name; a blank stored name shows as UNNAMED_CATEGORY."""
        if not isinstance(self.name, str) or not self.name.strip():
            return UNNAMED_CATEGORY
        return self.name

    def select(self, image_id: str) -> str:
        try:
            return self._items[image_id]
        except (KeyError, TypeError):
            raise NotFoundError(
                f"Image {image_id!r} not found in category {self.get_category()!r}"
            ) from None

    def has_image(self, image_id: str) -> bool:
        try:
            return image_id in self._items
        except TypeError:
            # Unhashable ids can never be stored
            return False

    def items(self) -> Iterator[Tuple[str, str]]:
        """(image_id, text) pairs in insertion order."""
        return iter(list(self._items.items()))

"""
AACPage interface.

A display layer holds "whichever page is active" through this type: the
board as a whole (delegating to its current category) or a single category.
"""
from abc import ABC, abstractmethod
from typing import List

# Shown when a category has a blank name or no category is selected
UNNAMED_CATEGORY = "Unnamed Category"


class AACPage(ABC):
    """The five operations every displayable page supports."""

    @abstractmethod
    def add_item(self, image_id: str, text: str) -> None:
        """Add (or overwrite) the text spoken for image_id."""

    @abstractmethod
    def get_image_locs(self) -> List[str]:
        """Image ids on this page, in display order. Never raises."""

    @abstractmethod
    def get_category(self) -> str:
        """Display name of this page. Never raises."""

    @abstractmethod
    def select(self, image_id: str) -> str:
        """Text spoken for image_id. Raises NotFoundError when absent."""

    @abstractmethod
    def has_image(self, image_id: str) -> bool:
        """Whether image_id is on this page. Never raises."""

"""
Board: the two-level AAC mapping (categories of items) plus a cursor.

The cursor names the category currently displayed. Image-level operations
delegate to that category. With no category selected the board is on its
home page: read-only queries return empty/False/UNNAMED_CATEGORY and
lookups or mutations raise.

Board files are loaded and saved in the format described in fileformat.py.
Load and save problems are reported (logged and recorded, or returned as
False) rather than raised, unless strict=True.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .category import Category
from .errors import (
    AACError,
    EmptyBoardError,
    IOFailureError,
    MalformedLineError,
    NoCurrentCategoryError,
    NotFoundError,
)
from .fileformat import LineKind, parse_line, render_board
from .page import AACPage, UNNAMED_CATEGORY

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class LoadProblem:
    """Something that went wrong while loading a board file."""
    line_number: Optional[int]
    message: str
    error: AACError


class Board(AACPage):
    """Categories keyed by name, in insertion order, and the current-category cursor."""

    def __init__(self, categories: Iterable[Category] = ()):
        self._categories: Dict[str, Category] = {}
        self._cursor: Optional[str] = None
        self.problems: List[LoadProblem] = []
        for category in categories:
            self._categories[category.name] = category

    def __repr__(self) -> str:
        return f"Board(categories={list(self._categories)!r}, current={self._cursor!r})"

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, name) -> bool:
        try:
            return name in self._categories
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Category]:
        return iter(list(self._categories.values()))

    # ──────────────────────────────────────────
    # Loading
    # ──────────────────────────────────────────

    @classmethod
    def load(cls, path: PathLike, strict: bool = False) -> "Board":
        """
        Build a board from a board file.

        Each category is committed only once its section is fully read (at the
        next header or end of file), so a failure part-way through leaves the
        board holding the categories read so far and nothing half-built.
        Problems go to board.problems and the log; with strict=True the first
        one is raised instead.
        """
        board = cls()
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                board._read_lines(f, strict)
        except (OSError, UnicodeDecodeError) as e:
            err = IOFailureError(f"Cannot read board file {path}: {e}", path=str(path))
            if strict:
                raise err from e
            board._report(None, err)

        logger.info(
            f"Loaded {len(board)} categories from {path}"
            + (f" ({len(board.problems)} problems)" if board.problems else "")
        )
        return board

    def _read_lines(self, lines: Iterable[str], strict: bool) -> None:
        pending: Optional[Category] = None
        pending_line = 0

        for number, raw in enumerate(lines, start=1):
            try:
                parsed = parse_line(raw, number)
            except MalformedLineError as e:
                if strict:
                    raise
                self._report(number, e)
                continue

            if parsed is None:
                continue

            if parsed.kind == LineKind.CATEGORY:
                if pending is not None:
                    self._commit(pending, pending_line, strict)
                pending = Category(parsed.label, parsed.image_loc)
                pending_line = number
            elif pending is not None:
                pending.add_item(parsed.image_loc, parsed.label)
            else:
                logger.debug(f"Line {number}: item before any category header, dropped")

        if pending is not None:
            self._commit(pending, pending_line, strict)

    def _commit(self, category: Category, line_number: int, strict: bool) -> None:
        if category.name in self._categories:
            err = MalformedLineError(
                f"Line {line_number}: category {category.name!r} repeated, earlier one replaced",
                line_number=line_number,
            )
            if strict:
                raise err
            self._report(line_number, err)
        self._categories[category.name] = category

    def _report(self, line_number: Optional[int], err: AACError) -> None:
        logger.warning(str(err))
        self.problems.append(LoadProblem(line_number=line_number, message=str(err), error=err))

    # ──────────────────────────────────────────
    # Saving
    # ──────────────────────────────────────────

    def save(self, path: PathLike, strict: bool = False) -> bool:
        """
        Write every category and item to path, replacing the file.

        The text is rendered in full before the file is touched and written
        through a temp file, so a failure leaves both the board and any
        existing file unchanged. Returns True on success; on failure logs and
        returns False, or raises when strict=True.
        """
        path = Path(path)
        try:
            text = render_board(self._categories.values())
        except MalformedLineError as e:
            logger.error(f"Cannot save board to {path}: {e}")
            if strict:
                raise
            return False

        tmp_file = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, "w", encoding="utf-8") as f:
                f.write(text)
            tmp_file.replace(path)
        except OSError as e:
            logger.error(f"Error saving board to {path}: {e}")
            try:
                tmp_file.unlink()
            except OSError:
                pass  # Temp file was never created
            if strict:
                raise IOFailureError(f"Cannot write board file {path}: {e}", path=str(path)) from e
            return False

        logger.info(f"Saved {len(self)} categories to {path}")
        return True

    # ──────────────────────────────────────────
    # Cursor
    # ──────────────────────────────────────────

    @property
    def current(self) -> Optional[str]:
        """Name of the current category, or None on the home page."""
        return self._cursor if self._cursor in self._categories else None

    def _current_category(self) -> Optional[Category]:
        if self._cursor is None:
            return None
        return self._categories.get(self._cursor)

    def reset(self) -> None:
        """Point the cursor at the first category. Raises EmptyBoardError if there is none."""
        if not self._categories:
            self._cursor = None
            raise EmptyBoardError("No categories available to reset to")
        self._cursor = next(iter(self._categories))

    def go_home(self) -> None:
        """Clear the cursor (back to the home page)."""
        self._cursor = None

    def open_category(self, image_loc: str) -> str:
        """
        Move the cursor to the category whose home image is image_loc.

        Returns the category name. Raises NotFoundError when no category
        uses that image.
        """
        for name, category in self._categories.items():
            if category.image_loc == image_loc:
                self._cursor = name
                return name
        raise NotFoundError(f"No category with image {image_loc!r}")

    # ──────────────────────────────────────────
    # Home page
    # ──────────────────────────────────────────

    def category_names(self) -> List[str]:
        return list(self._categories)

    def get_home_image_locs(self) -> List[str]:
        """Home image of every category, in category order."""
        return [c.image_loc for c in self._categories.values()]

    def get_category_page(self, name: str) -> Optional[Category]:
        """The Category named name, or None."""
        try:
            return self._categories.get(name)
        except TypeError:
            return None

    # ──────────────────────────────────────────
    # AACPage operations on the current category
    # ──────────────────────────────────────────

    def add_item(self, image_id: str, text: str) -> None:
        category = self._current_category()
        if category is None:
            raise NoCurrentCategoryError(
                "No current category; call reset() or open_category() first"
            )
        category.add_item(image_id, text)

    def get_image_locs(self) -> List[str]:
        category = self._current_category()
        return category.get_image_locs() if category is not None else []

    def get_category(self) -> str:
        category = self._current_category()
        return category.get_category() if category is not None else UNNAMED_CATEGORY

    def select(self, image_id: str) -> str:
        category = self._current_category()
        if category is None:
            raise NotFoundError(f"Image {image_id!r} not found: no category selected")
        return category.select(image_id)

    def has_image(self, image_id: str) -> bool:
        category = self._current_category()
        return category is not None and category.has_image(image_id)

# AAC board file format
#
# One line per category header or item, UTF-8:
#
#   img/food/plate.png food                      <- category header
#   >img/food/icons8-watermelon-96.png watermelon <- item in that category
#
# The header names the category's home image and its name; item lines
# belong to the most recent header. Everything else is ignored.

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import MalformedLineError

IMAGE_PREFIX = "img/"
ITEM_MARKER = ">"


class LineKind:
    """Kinds of meaningful board file lines."""
    CATEGORY = "category"
    ITEM = "item"


@dataclass
class ParsedLine:
    """One recognised line: an image path plus its label (name or text)."""
    kind: str
    image_loc: str
    label: str
    line_number: int = 0


def parse_line(line: str, line_number: int = 0) -> Optional[ParsedLine]:
    """
    Parse a single board file line.

    Returns None for blank or unrecognised lines. Raises MalformedLineError
    when a line starts like a header or item but has no label after the
    image path.
    """
    stripped = line.strip()
    if not stripped:
        return None

    if stripped.startswith(ITEM_MARKER + IMAGE_PREFIX):
        kind = LineKind.ITEM
        body = stripped[len(ITEM_MARKER):]
    elif stripped.startswith(IMAGE_PREFIX):
        kind = LineKind.CATEGORY
        body = stripped
    else:
        return None

    parts = body.split(" ", 1)
    if len(parts) < 2 or not parts[1].strip():
        what = "category name" if kind == LineKind.CATEGORY else "item text"
        raise MalformedLineError(
            f"Line {line_number}: missing {what} after {parts[0]!r}",
            line_number=line_number,
            line=stripped,
        )

    return ParsedLine(kind=kind, image_loc=parts[0], label=parts[1], line_number=line_number)


def _check_image_loc(image_loc: str, context: str) -> None:
    if not isinstance(image_loc, str) or not image_loc.startswith(IMAGE_PREFIX):
        raise MalformedLineError(f"{context}: image location {image_loc!r} must start with {IMAGE_PREFIX!r}")
    if " " in image_loc:
        # The first space separates the path from its label
        raise MalformedLineError(f"{context}: image location {image_loc!r} contains a space")
    if "\n" in image_loc or "\r" in image_loc:
        raise MalformedLineError(f"{context}: image location {image_loc!r} contains a line break")


def _check_label(label: str, context: str) -> None:
    if not isinstance(label, str) or not label.strip():
        raise MalformedLineError(f"{context}: label cannot be empty")
    if "\n" in label or "\r" in label:
        raise MalformedLineError(f"{context}: label {label!r} contains a line break")
    if label != label.rstrip():
        # Lines are stripped on load, so trailing whitespace would not survive
        raise MalformedLineError(f"{context}: label {label!r} has trailing whitespace")


def default_category_image(name: str) -> str:
    """Header image used for categories created without one."""
    return IMAGE_PREFIX + "_".join(name.split())


def format_category(name: str, image_loc: str = "") -> str:
    """Render a category header line (no trailing newline)."""
    _check_label(name, f"Category {name!r}")
    image_loc = image_loc or default_category_image(name)
    _check_image_loc(image_loc, f"Category {name!r}")
    return f"{image_loc} {name}"


def format_item(image_id: str, text: str) -> str:
    """Render an item line (no trailing newline)."""
    _check_image_loc(image_id, f"Item {image_id!r}")
    _check_label(text, f"Item {image_id!r}")
    return f"{ITEM_MARKER}{image_id} {text}"


def render_board(categories: Iterable) -> str:
    """
    Render categories (Category objects) to the full file text.

    Raises MalformedLineError if any header or item cannot be written
    in a form that loads back unchanged.
    """
    lines: List[str] = []
    for category in categories:
        lines.append(format_category(category.name, category.image_loc))
        for image_id, text in category.items():
            lines.append(format_item(image_id, text))
    return "".join(line + "\n" for line in lines)

# AAC board: categories of image -> spoken text mappings, plus a cursor
#
# Components:
#   errors.py     - Exception taxonomy (AACError and subclasses)
#   page.py       - AACPage interface shared by Category and Board
#   category.py   - Category: one named image -> text mapping
#   board.py      - Board: categories, cursor, load/save
#   fileformat.py - Line-oriented board file grammar
#   config.py     - YAML configuration
#   cli.py        - `aacboard` command line entry point

from .errors import (
    AACError,
    InvalidArgumentError,
    NotFoundError,
    NoCurrentCategoryError,
    EmptyBoardError,
    IOFailureError,
    MalformedLineError,
)
from .page import AACPage, UNNAMED_CATEGORY
from .category import Category
from .board import Board, LoadProblem

__all__ = [
    "AACError",
    "InvalidArgumentError",
    "NotFoundError",
    "NoCurrentCategoryError",
    "EmptyBoardError",
    "IOFailureError",
    "MalformedLineError",
    "AACPage",
    "UNNAMED_CATEGORY",
    "Category",
    "Board",
    "LoadProblem",
]

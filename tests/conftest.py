"""Shared test fixtures for aacboard tests."""

import pytest

EXAMPLE_BOARD = (
    "img/food/plate.png food\n"
    ">img/food/icons8-french-fries-96.png french fries\n"
    ">img/food/icons8-watermelon-96.png watermelon\n"
    "img/clothing/hanger.png clothing\n"
    ">img/clothing/collaredshirt.png collared shirt\n"
)


@pytest.fixture
def board_file(tmp_path):
    """The two-category example board written to a temp file."""
    path = tmp_path / "board.txt"
    path.write_text(EXAMPLE_BOARD, encoding="utf-8")
    return path


@pytest.fixture
def write_board(tmp_path):
    """Write arbitrary board text to a temp file and return its path."""
    def _write(text: str, name: str = "custom.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write

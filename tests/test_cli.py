"""Tests for the aacboard command line (cli.py)"""
import pytest

from aacboard import Board
from aacboard.cli import main


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path, monkeypatch):
    # Keep a developer's aacboard.yaml out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AACBOARD_CONFIG", raising=False)


def test_home_lists_categories(board_file, capsys):
    """home prints each category image and name"""
    assert main(["--board", str(board_file), "home"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["img/food/plate.png\tfood", "img/clothing/hanger.png\tclothing"]


def test_show_defaults_to_first_category(board_file, capsys):
    """show without --category lists the first category"""
    assert main(["--board", str(board_file), "show"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# food\n")
    assert "img/food/icons8-watermelon-96.png\twatermelon" in out


def test_show_named_category(board_file, capsys):
    """show --category lists the chosen category"""
    assert main(["--board", str(board_file), "show", "--category", "img/clothing/hanger.png"]) == 0
    assert "collared shirt" in capsys.readouterr().out


def test_say(board_file, capsys):
    """say prints the spoken text"""
    assert main(["--board", str(board_file), "say", "img/food/icons8-french-fries-96.png"]) == 0
    assert capsys.readouterr().out.strip() == "french fries"


def test_say_missing_image_fails(board_file, capsys):
    """say exits 1 for an unknown image"""
    assert main(["--board", str(board_file), "say", "img/nope.png"]) == 1
    assert "error:" in capsys.readouterr().err


def test_add_saves_board(board_file):
    """add writes the new item to the board file"""
    rc = main([
        "--board", str(board_file),
        "add", "img/clothing/hat.png", "sun hat",
        "--category", "img/clothing/hanger.png",
    ])
    assert rc == 0
    board = Board.load(board_file)
    board.open_category("img/clothing/hanger.png")
    assert board.select("img/clothing/hat.png") == "sun hat"


def test_add_unwritable_item_fails(board_file):
    """add exits 1 and leaves the file alone when the item cannot be saved"""
    before = board_file.read_text(encoding="utf-8")
    assert main(["--board", str(board_file), "add", "hat.png", "hat"]) == 1
    assert board_file.read_text(encoding="utf-8") == before


def test_check_clean_board(board_file, capsys):
    """check reports counts and exits 0 for a clean board"""
    assert main(["--board", str(board_file), "check"]) == 0
    assert "2 categories, 3 items, 0 problems" in capsys.readouterr().out


def test_check_reports_problems(write_board, capsys):
    """check exits 1 when the board has problems"""
    path = write_board("img/food/plate.png food\n>img/food/apple.png\n")
    assert main(["--board", str(path), "check"]) == 1
    assert "1 problems" in capsys.readouterr().out


def test_show_empty_board_fails(write_board, capsys):
    """show exits 1 on a board with no categories"""
    path = write_board("")
    assert main(["--board", str(path), "show"]) == 1
    assert "No category selected" in capsys.readouterr().err

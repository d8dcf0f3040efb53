#!/usr/bin/env python3
"""
aacboard: inspect and edit AAC board files from the command line.

Usage:
    aacboard home                                  # list categories
    aacboard show                                  # items of the first category
    aacboard show --category img/food/plate.png    # items of a given category
    aacboard say img/food/icons8-watermelon-96.png # spoken text for an image
    aacboard add img/food/apple.png apple --category img/food/plate.png
    aacboard check --board board.txt               # report file problems
"""

import argparse
import logging
import sys
from typing import List, Optional

from .board import Board
from .config import Config
from .errors import AACError, NoCurrentCategoryError

logger = logging.getLogger(__name__)


def _setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [aacboard] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _open_board(cfg: Config, category: Optional[str] = None) -> Board:
    """Load the board and position the cursor for a command."""
    board = Board.load(cfg.board_path, strict=cfg.strict_load)
    if category:
        board.open_category(category)
    elif cfg.reset_on_load and len(board):
        board.reset()
    return board


def _require_current(board: Board):
    if board.current is None:
        raise NoCurrentCategoryError(
            "No category selected (board is empty or reset_on_load is off); use --category"
        )


# ── Commands ───────────────────────────────────────────────────────────────

def cmd_home(cfg: Config, args) -> int:
    board = _open_board(cfg)
    for category in board:
        print(f"{category.image_loc}\t{category.get_category()}")
    return 0


def cmd_show(cfg: Config, args) -> int:
    board = _open_board(cfg, args.category)
    _require_current(board)
    print(f"# {board.get_category()}")
    for image_id in board.get_image_locs():
        print(f"{image_id}\t{board.select(image_id)}")
    return 0


def cmd_say(cfg: Config, args) -> int:
    board = _open_board(cfg, args.category)
    print(board.select(args.image))
    return 0


def cmd_add(cfg: Config, args) -> int:
    board = _open_board(cfg, args.category)
    board.add_item(args.image, args.text)
    if not board.save(cfg.save_path):
        print(f"error: could not save board to {cfg.save_path}", file=sys.stderr)
        return 1
    print(f"Added {args.image} to {board.get_category()}")
    return 0


def cmd_check(cfg: Config, args) -> int:
    board = Board.load(cfg.board_path)
    for problem in board.problems:
        print(problem.message)
    items = sum(len(c) for c in board)
    print(f"{len(board)} categories, {items} items, {len(board.problems)} problems")
    return 1 if board.problems else 0


COMMANDS = {
    "home": cmd_home,
    "show": cmd_show,
    "say": cmd_say,
    "add": cmd_add,
    "check": cmd_check,
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="aacboard",
        description="Inspect and edit AAC board files",
    )
    ap.add_argument("--config", default=None, help="Path to aacboard.yaml")
    ap.add_argument("--board", default=None, help="Board file (overrides config board_path)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("home", help="List categories (home page)")

    p = sub.add_parser("show", help="List the items of a category")
    p.add_argument("--category", default=None, help="Category image (default: first category)")

    p = sub.add_parser("say", help="Print the text spoken for an image")
    p.add_argument("image")
    p.add_argument("--category", default=None, help="Category image (default: first category)")

    p = sub.add_parser("add", help="Add an item to a category and save the board")
    p.add_argument("image")
    p.add_argument("text")
    p.add_argument("--category", default=None, help="Category image (default: first category)")

    sub.add_parser("check", help="Load the board and report problems")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = Config.load(args.config)
    if args.board:
        # --board moves both load and save targets
        cfg.board_path = args.board
        cfg.save_path = ""
        cfg.resolve_paths()

    _setup_logging("DEBUG" if args.verbose else cfg.log_level)
    logger.debug(f"Board file: {cfg.board_path}")

    try:
        return COMMANDS[args.command](cfg, args)
    except AACError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

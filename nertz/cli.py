#!/usr/bin/env python3
"""
NERTZ.PRO score tracker CLI

Each invocation applies one command to the saved game and prints the
resulting scoresheet.

Usage:
    nertz add Max
    nertz add Bella
    nertz start
    nertz score 0 0 10
    nertz edit 0 0
    nertz show
    nertz export scores.xlsx
"""

import argparse
import logging
import sys

from .config import get_config
from .controller import (
    AddPlayer,
    EnterScore,
    GameController,
    NewGame,
    RemovePlayer,
    SetEditing,
    StartGame,
)
from .errors import NertzError, PersistenceSaveError
from .excel_export import export_scoresheet
from .logging_config import setup_logging
from .scoresheet import render_scoresheet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='nertz', description="NERTZ.PRO score tracker")
    parser.add_argument(
        "--state", "-s",
        default=None,
        help="Path to the saved game (defaults to state_path from config)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a player")
    add.add_argument("name")

    remove = sub.add_parser("remove", help="Remove the player at a roster position")
    remove.add_argument("index", type=int)

    sub.add_parser("start", help="Start the game")
    sub.add_parser("new", help="Clear all rounds, keep the roster")

    score = sub.add_parser("score", help="Enter a score")
    score.add_argument("round", type=int)
    score.add_argument("player", type=int)
    score.add_argument("value", type=int)

    edit = sub.add_parser("edit", help="Move the cursor to a cell")
    edit.add_argument("round", type=int)
    edit.add_argument("player", type=int)

    sub.add_parser("show", help="Print the scoresheet")

    export = sub.add_parser("export", help="Write the scoresheet to an .xlsx file")
    export.add_argument("path")

    return parser


def to_command(args: argparse.Namespace):
    if args.command == "add":
        return AddPlayer(args.name)
    if args.command == "remove":
        return RemovePlayer(args.index)
    if args.command == "start":
        return StartGame()
    if args.command == "new":
        return NewGame()
    if args.command == "score":
        return EnterScore(args.round, args.player, args.value)
    if args.command == "edit":
        return SetEditing(args.round, args.player)
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        print(f"❌ Invalid configuration: {e}")
        return 1
    if args.state:
        config = config.model_copy(update={"state_path": args.state})

    setup_logging(config, verbose=args.verbose)
    logger = logging.getLogger('nertz.cli')

    command = to_command(args)
    try:
        game = GameController.from_config(config)
        view = game.dispatch(command) if command is not None else game.view()
    except PersistenceSaveError as e:
        print(f"❌ {e}")
        return 2
    except NertzError as e:
        print(f"❌ {e}")
        return 1

    if args.command == "export":
        try:
            path = export_scoresheet(view, args.path)
        except OSError as e:
            logger.info(f"Export to {args.path} failed: {e}")
            print(f"❌ Could not write {args.path}: {e}")
            return 1
        print(f"Scoresheet saved to {path}")
        return 0

    logger.debug(f"Focused cell: {view.focused}")
    print(render_scoresheet(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())

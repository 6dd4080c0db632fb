"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessmate.game.settings import GameSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmate",
        description="Two-player chess on one screen or one terminal.",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="play in the terminal instead of the graphical board",
    )
    parser.add_argument(
        "--allow-self-check",
        action="store_true",
        help="accept moves that leave the mover's own king attacked",
    )
    parser.add_argument(
        "--theme",
        default="Classic",
        choices=["Classic", "Blue", "Green"],
        help="board colour scheme (graphical mode)",
    )
    parser.add_argument(
        "--no-coordinates",
        action="store_true",
        help="hide rank and file labels (graphical mode)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        allow_self_check=args.allow_self_check,
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch the Chessmate application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args)

    if args.console:
        from chessmate.console import ConsoleGame
        from chessmate.game.controller import GameController

        return ConsoleGame(GameController(settings)).run()

    from chessmate.ui.bootstrap import run_application

    return run_application(settings=settings)


if __name__ == "__main__":
    sys.exit(main())

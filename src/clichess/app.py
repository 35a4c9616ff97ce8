"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from clichess.core.enums import Color
from clichess.game.config import GameConfig
from clichess.game.player import DEFAULT_SUGGESTION_ATTEMPTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clichess",
        description="Play chess against a move-suggestion agent.",
    )
    parser.add_argument(
        "--color",
        choices=("white", "black"),
        default="white",
        help="side you play (default: white)",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_SUGGESTION_ATTEMPTS,
        help="move proposals the agent gets per turn (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the agent")
    parser.add_argument(
        "--fen",
        default=None,
        help="start from this FEN placement (board and side fields)",
    )
    parser.add_argument(
        "--unicode", action="store_true", help="draw pieces as unicode symbols"
    )
    parser.add_argument("--gui", action="store_true", help="open the Qt board instead")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        human_color=Color.WHITE if args.color == "white" else Color.BLACK,
        max_attempts=args.attempts,
        seed=args.seed,
        fen=args.fen,
        unicode=args.unicode,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch a game in the terminal (or the Qt window with ``--gui``)."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.gui:
        from clichess.ui.bootstrap import run_application

        return run_application(config)

    from clichess.cli.terminal import TerminalGame
    from clichess.game.session import GameSession

    TerminalGame(GameSession.from_config(config), unicode=config.unicode).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

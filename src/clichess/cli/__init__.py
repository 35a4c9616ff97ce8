"""Terminal front end: text rendering and the interactive prompt loop."""

from clichess.cli.render import render_board
from clichess.cli.terminal import TerminalGame

__all__ = ["TerminalGame", "render_board"]

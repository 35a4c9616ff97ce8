"""Shared pytest fixtures: Qt application handling and well-known positions."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from clichess.core.board import Board
from clichess.core.notation import board_from_fen

# Headless Linux runners have no display server; Qt needs the offscreen plugin there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w"
STALEMATE_FEN = "8/8/8/8/8/1q6/8/K6k w"


def _in_ui_package(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for the whole run; Qt allows only a single instance."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _close_qt_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close whatever top-level widgets a UI test left open."""
    if not _in_ui_package(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def fools_mate() -> Board:
    """White is checkmated after 1. f3 e5 2. g4 Qh4#."""
    return board_from_fen(FOOLS_MATE_FEN)


@pytest.fixture
def stalemate() -> Board:
    """White king on a1 boxed in by the black queen on b3, White to move."""
    return board_from_fen(STALEMATE_FEN)

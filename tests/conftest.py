"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from chesskers.core.board import BoardState
from chesskers.core.enums import Team
from chesskers.core.layout import BoardLayout
from chesskers.game.engine import TurnEngine
from chesskers.game.settings import EngineSettings

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def empty_board() -> BoardState:
    return BoardState.empty()


EngineFactory = Callable[..., TurnEngine]


@pytest.fixture
def make_engine() -> EngineFactory:
    """Factory: engine starting from a custom diagram.

    Extra keyword arguments go to :class:`EngineSettings`, except
    ``first_team`` which goes to the engine itself.
    """

    def _make(
        diagram: str, first_team: Team = Team.CHECKERS, **settings: Any
    ) -> TurnEngine:
        layout = BoardLayout.from_diagram(diagram)
        return TurnEngine(EngineSettings(layout=layout, **settings), first_team)

    return _make

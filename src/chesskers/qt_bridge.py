"""Qt bridge exposing the turn engine as signals and slots.

A board view connects its click handler to :meth:`EngineBridge.select` /
:meth:`EngineBridge.move_to` and repaints from the signals.  Everything
runs on the GUI thread; the engine commits each move before any signal
fires.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesskers.core.errors import ChesskersError
from chesskers.game.engine import TurnEngine
from chesskers.game.events import (
    ChainCaptureContinues,
    EngineEvent,
    GameEnded,
    PieceCaptured,
    PieceMoved,
    PiecePromoted,
    SelectionChanged,
    TurnChanged,
)

_LOGGER = logging.getLogger(__name__)


class EngineBridge(QObject):
    """GUI-thread adapter re-emitting engine events as Qt signals."""

    selection_changed = pyqtSignal(object, object)  # piece | None, destinations
    piece_moved = pyqtSignal(object, object, object)  # piece, from, to
    piece_captured = pyqtSignal(object, object)  # piece, at
    piece_promoted = pyqtSignal(object, object)  # old, new
    turn_changed = pyqtSignal(int)
    chain_capture = pyqtSignal(object, object)  # piece, destinations
    game_ended = pyqtSignal(int, str)  # winning team, reason
    rejected = pyqtSignal(str)

    __slots__ = ("_engine",)

    def __init__(self, engine: TurnEngine | None = None) -> None:
        super().__init__()
        self._engine = engine if engine is not None else TurnEngine()
        self._engine.events.on_any.append(self._forward)

    @property
    def engine(self) -> TurnEngine:
        return self._engine

    @pyqtSlot(int, int)
    def select(self, row: int, col: int) -> None:
        """Select the piece on ``(row, col)``; emits ``rejected`` on refusal."""
        try:
            self._engine.select((row, col))
        except ChesskersError as exc:
            _LOGGER.warning("Selection rejected: %s", exc)
            self.rejected.emit(str(exc))

    @pyqtSlot(int, int)
    def move_to(self, row: int, col: int) -> None:
        """Move the selected piece to ``(row, col)``."""
        try:
            self._engine.move_to((row, col))
        except ChesskersError as exc:
            _LOGGER.warning("Move rejected: %s", exc)
            self.rejected.emit(str(exc))

    @pyqtSlot()
    def deselect(self) -> None:
        try:
            self._engine.deselect()
        except ChesskersError as exc:
            _LOGGER.warning("Deselection rejected: %s", exc)
            self.rejected.emit(str(exc))

    @pyqtSlot()
    def new_game(self) -> None:
        self._engine.new_game()

    def _forward(self, event: EngineEvent) -> None:
        match event:
            case SelectionChanged(piece=piece, destinations=destinations):
                self.selection_changed.emit(piece, destinations)
            case PieceMoved(piece=piece, from_cell=origin, to_cell=target):
                self.piece_moved.emit(piece, origin, target)
            case PieceCaptured(piece=piece, at=at):
                self.piece_captured.emit(piece, at)
            case PiecePromoted(old_piece=old, new_piece=new):
                self.piece_promoted.emit(old, new)
            case TurnChanged(team=team):
                self.turn_changed.emit(int(team))
            case ChainCaptureContinues(piece=piece, destinations=destinations):
                self.chain_capture.emit(piece, destinations)
            case GameEnded(winner=winner, reason=reason):
                self.game_ended.emit(int(winner), str(reason))

"""Game management layer — turn engine, events, settings.

Quick start::

    from chesskers.game import TurnEngine

    engine = TurnEngine()
    engine.select((2, 0))
    outcome = engine.move_to((3, 1))
"""

from chesskers.game.engine import MoveOutcome, MoveRecord, TurnEngine
from chesskers.game.events import (
    ChainCaptureContinues,
    EngineEvent,
    EngineEvents,
    GameEnded,
    PieceCaptured,
    PieceMoved,
    PiecePromoted,
    SelectionChanged,
    TurnChanged,
)
from chesskers.game.interfaces import GamePhase, ITurnEngine, Selectable
from chesskers.game.settings import EngineSettings

__all__ = [
    # Interfaces
    "GamePhase",
    "ITurnEngine",
    "Selectable",
    # Events
    "ChainCaptureContinues",
    "EngineEvent",
    "EngineEvents",
    "GameEnded",
    "PieceCaptured",
    "PieceMoved",
    "PiecePromoted",
    "SelectionChanged",
    "TurnChanged",
    # Concrete
    "EngineSettings",
    "MoveOutcome",
    "MoveRecord",
    "TurnEngine",
]

"""Events emitted by the turn engine for the presentation layer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from chesskers.core.enums import GameEndReason, Team
from chesskers.core.piece import Piece
from chesskers.core.types import Position


@dataclass(frozen=True, slots=True)
class SelectionChanged:
    """Selection (and highlighted destinations) changed; *piece* may be None."""

    piece: Piece | None
    destinations: tuple[Position, ...] = ()


@dataclass(frozen=True, slots=True)
class PieceMoved:
    piece: Piece
    from_cell: Position
    to_cell: Position


@dataclass(frozen=True, slots=True)
class PieceCaptured:
    piece: Piece
    at: Position


@dataclass(frozen=True, slots=True)
class PiecePromoted:
    old_piece: Piece
    new_piece: Piece


@dataclass(frozen=True, slots=True)
class TurnChanged:
    team: Team


@dataclass(frozen=True, slots=True)
class ChainCaptureContinues:
    """The same piece must keep capturing; *destinations* are its hops."""

    piece: Piece
    destinations: tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class GameEnded:
    winner: Team
    reason: GameEndReason


EngineEvent: TypeAlias = (
    SelectionChanged
    | PieceMoved
    | PieceCaptured
    | PiecePromoted
    | TurnChanged
    | ChainCaptureContinues
    | GameEnded
)
EventCallback = Callable[[EngineEvent], None]


@dataclass
class EngineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[Callable[[SelectionChanged], None]] = field(
        default_factory=list
    )
    on_piece_moved: list[Callable[[PieceMoved], None]] = field(default_factory=list)
    on_piece_captured: list[Callable[[PieceCaptured], None]] = field(
        default_factory=list
    )
    on_piece_promoted: list[Callable[[PiecePromoted], None]] = field(
        default_factory=list
    )
    on_turn_changed: list[Callable[[TurnChanged], None]] = field(default_factory=list)
    on_chain_capture: list[Callable[[ChainCaptureContinues], None]] = field(
        default_factory=list
    )
    on_game_ended: list[Callable[[GameEnded], None]] = field(default_factory=list)
    # Receives every event, in emission order.
    on_any: list[EventCallback] = field(default_factory=list)

    def handlers(self, event: EngineEvent) -> list[Callable[..., None]]:
        match event:
            case SelectionChanged():
                return self.on_selection_changed
            case PieceMoved():
                return self.on_piece_moved
            case PieceCaptured():
                return self.on_piece_captured
            case PiecePromoted():
                return self.on_piece_promoted
            case TurnChanged():
                return self.on_turn_changed
            case ChainCaptureContinues():
                return self.on_chain_capture
            case GameEnded():
                return self.on_game_ended
        raise TypeError(f"Unknown engine event: {event!r}")

    def emit(self, event: EngineEvent) -> None:
        for cb in self.handlers(event):
            cb(event)
        for cb in self.on_any:
            cb(event)

"""Turn state machine phases and the interface presentation talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesskers.core.piece import Piece
from chesskers.core.types import Position

if TYPE_CHECKING:
    from chesskers.game.engine import MoveOutcome


# ── Turn FSM states ──────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn engine."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    CHAIN_CAPTURE = auto()  # PIECE_SELECTED, locked to the capturing checker
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class Selectable:
    """What a picking layer should treat as clickable right now."""

    cells: tuple[Position, ...] = ()
    pieces: tuple[Piece, ...] = ()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnEngine(ABC):
    """Interface for the turn orchestrator."""

    @abstractmethod
    def new_game(self) -> None:
        """Reset the board and hand the first turn out."""

    @abstractmethod
    def select(self, pos: Position) -> tuple[Position, ...]:
        """Select the piece on *pos*. Returns its legal destinations."""

    @abstractmethod
    def deselect(self) -> None:
        """Drop the current selection."""

    @abstractmethod
    def move_to(self, pos: Position) -> MoveOutcome:
        """Move the selected piece to *pos* and resolve the consequences."""

    @abstractmethod
    def selectable(self) -> Selectable:
        """Cells and pieces the current player may click."""

"""Core enumerations for the hybrid chess/checkers domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Team(IntEnum):
    """Side of the board.  Each side plays its own rule set."""

    CHESS = 1
    CHECKERS = 2

    @property
    def opposite(self) -> Team:
        return Team(3 - self.value)

    @property
    def forward(self) -> int:
        """Row direction this team advances in (chess climbs towards row 0)."""
        return -1 if self == Team.CHESS else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Every piece kind that may appear on the shared board."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
    CHECKER = 7
    CROWNED_CHECKER = 8

    @property
    def is_checker(self) -> bool:
        """Checker family: plain and crowned checkers."""
        return self in (PieceKind.CHECKER, PieceKind.CROWNED_CHECKER)


class MoveMode(IntEnum):
    """How a single delta is applied by the move generator."""

    SLIDE = 0  # repeat until blocked, capture ends the ray
    STEP = 1  # once, empty or enemy
    ATTACK_ONLY = 2  # once, enemy only
    EMPTY_ONLY = 3  # once, empty only


class GameEndReason(StrEnum):
    """Why a game finished."""

    KING_CAPTURED = "king_captured"
    ALL_CHECKERS_CAPTURED = "all_checkers_captured"
    NO_LEGAL_MOVES = "no_legal_moves"

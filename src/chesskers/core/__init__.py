"""Core domain layer — board, pieces and move generation, no external dependencies.

Quick start::

    from chesskers.core import BoardState, MoveGenerator

    board = BoardState()
    gen = MoveGenerator(board)
    print(gen.destinations((2, 0)))
"""

from chesskers.core.board import BoardState, Cell
from chesskers.core.enums import GameEndReason, MoveMode, PieceKind, Team
from chesskers.core.errors import (
    ChesskersError,
    IllegalMoveError,
    InvalidSelectionError,
    NoPieceSelectedError,
    OutOfBoundsError,
)
from chesskers.core.layout import BoardLayout
from chesskers.core.move_generator import MoveGenerator
from chesskers.core.notation import STANDARD_DIAGRAM
from chesskers.core.piece import DELTA_TABLE, Delta, Piece, deltas_for
from chesskers.core.types import BOARD_SIZE, Position, is_on_board, midpoint

__all__ = [
    # Enums
    "GameEndReason",
    "MoveMode",
    "PieceKind",
    "Team",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "is_on_board",
    "midpoint",
    # Errors
    "ChesskersError",
    "IllegalMoveError",
    "InvalidSelectionError",
    "NoPieceSelectedError",
    "OutOfBoundsError",
    # Domain objects
    "BoardLayout",
    "BoardState",
    "Cell",
    "DELTA_TABLE",
    "Delta",
    "MoveGenerator",
    "Piece",
    "deltas_for",
    # Notation
    "STANDARD_DIAGRAM",
]

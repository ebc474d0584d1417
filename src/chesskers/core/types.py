"""Position type alias and coordinate helpers.

Positions are ``(row, col)`` tuples.  Row 0 is the checkers home edge and
row 7 the chess back rank on the standard board::

    row 0   c . c . c . c .
    ...
    row 7   R N B Q K B N R
"""

from __future__ import annotations

from typing import TypeAlias

Position: TypeAlias = tuple[int, int]

BOARD_SIZE = 8


def is_on_board(cell: Position, size: int = BOARD_SIZE) -> bool:
    """True when both coordinates lie in ``[0, size)``."""
    row, col = cell
    return 0 <= row < size and 0 <= col < size


def offset(cell: Position, d_row: int, d_col: int) -> Position:
    """Cell displaced by ``(d_row, d_col)``; may fall off the board."""
    return (cell[0] + d_row, cell[1] + d_col)


def midpoint(a: Position, b: Position) -> Position | None:
    """Cell jumped over by a two-step diagonal hop from *a* to *b*.

    Returns ``None`` for any other geometry (plain steps have no midpoint).
    """
    d_row = b[0] - a[0]
    d_col = b[1] - a[1]
    if abs(d_row) != 2 or abs(d_col) != 2:
        return None
    return (a[0] + d_row // 2, a[1] + d_col // 2)


def cell_name(cell: Position) -> str:
    """Human-readable name used in logs and reprs, e.g. ``(2, 0)`` → ``'r2c0'``."""
    return f"r{cell[0]}c{cell[1]}"

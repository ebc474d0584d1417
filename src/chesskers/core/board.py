"""BoardState - the authoritative grid of cells and the pieces on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chesskers.core.enums import PieceKind, Team
from chesskers.core.errors import OutOfBoundsError
from chesskers.core.layout import BoardLayout
from chesskers.core.notation import diagram_from_rows
from chesskers.core.piece import Piece
from chesskers.core.types import Position, is_on_board


@dataclass(slots=True)
class Cell:
    """One square.  ``is_active`` is a UI highlight with no rules effect."""

    position: Position
    piece: Piece | None = None
    is_active: bool = False


class BoardState:
    """Mutable ``size × size`` grid.

    Every piece on the board is referenced by exactly one cell, and that
    cell's position equals ``piece.position``; :meth:`place` keeps this true.
    """

    __slots__ = ("_layout", "_size", "_cells")

    def __init__(self, layout: BoardLayout | None = None) -> None:
        self._layout = layout if layout is not None else BoardLayout.standard()
        self._size = self._layout.size
        self._cells: list[list[Cell]] = self._empty_grid()
        self.initialize()

    def _empty_grid(self) -> list[list[Cell]]:
        return [
            [Cell((row, col)) for col in range(self._size)] for row in range(self._size)
        ]

    @classmethod
    def empty(cls, size: int = 8) -> BoardState:
        """Board with no pieces, handy for building custom positions."""
        return cls(BoardLayout.from_diagram("/".join(["." * size] * size), "empty"))

    @classmethod
    def from_diagram(cls, diagram: str) -> BoardState:
        return cls(BoardLayout.from_diagram(diagram))

    # -- Properties ---------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def layout(self) -> BoardLayout:
        return self._layout

    # -- Lifecycle ----------------------------------------------------------

    def initialize(self) -> None:
        """Populate the grid with fresh pieces from the layout table."""
        for piece in self._layout.spawn():
            self.place(piece.position, piece)

    def clear(self) -> None:
        self._cells = self._empty_grid()

    def reset(self) -> None:
        """Drop every piece and start over from the layout."""
        self.clear()
        self.initialize()

    # -- Element access -----------------------------------------------------

    def check_on_board(self, cell: Position) -> bool:
        return is_on_board(cell, self._size)

    def cell(self, pos: Position) -> Cell:
        if not is_on_board(pos, self._size):
            raise OutOfBoundsError(f"{pos} is off the {self._size}x{self._size} board")
        return self._cells[pos[0]][pos[1]]

    def piece_at(self, cell: Position) -> Piece | None:
        return self.cell(cell).piece

    def __getitem__(self, cell: Position) -> Piece | None:
        return self.piece_at(cell)

    def __setitem__(self, cell: Position, piece: Piece | None) -> None:
        self.place(cell, piece)

    def is_empty(self, cell: Position) -> bool:
        return self.piece_at(cell) is None

    def is_enemy(self, cell: Position, team: Team) -> bool:
        """Cell holds a piece of the other team (False when empty)."""
        piece = self.piece_at(cell)
        return piece is not None and piece.team != team

    # -- Mutation -----------------------------------------------------------

    def place(self, cell: Position, piece: Piece | None) -> None:
        """Put *piece* (or nothing) on *cell*, replacing whatever was there.

        A piece still sitting on another cell is lifted from it first.
        """
        target = self.cell(cell)
        if piece is not None:
            if piece.position != cell and is_on_board(piece.position, self._size):
                origin = self._cells[piece.position[0]][piece.position[1]]
                if origin.piece is piece:
                    origin.piece = None
            piece.position = cell
        target.piece = piece

    def remove(self, cell: Position) -> Piece | None:
        """Empty *cell* and return the piece that was on it."""
        target = self.cell(cell)
        piece = target.piece
        target.piece = None
        return piece

    # -- Highlights ---------------------------------------------------------

    def set_active(self, cells: Iterable[Position]) -> None:
        """Highlight exactly *cells*."""
        self.clear_highlights()
        for cell in cells:
            self.cell(cell).is_active = True

    def clear_highlights(self) -> None:
        for row in self._cells:
            for c in row:
                c.is_active = False

    def active_cells(self) -> list[Position]:
        return [c.position for row in self._cells for c in row if c.is_active]

    # -- Query helpers ------------------------------------------------------

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def pieces(self, team: Team | None = None) -> list[Piece]:
        """Pieces on the board in row-major order, optionally for one team."""
        return [
            c.piece
            for c in self.cells()
            if c.piece is not None and (team is None or c.piece.team == team)
        ]

    def count(self, team: Team, kinds: Iterable[PieceKind] | None = None) -> int:
        wanted = None if kinds is None else frozenset(kinds)
        return sum(
            1 for piece in self.pieces(team) if wanted is None or piece.kind in wanted
        )

    def is_consistent(self) -> bool:
        """Each piece sits on exactly one cell whose position it records."""
        seen: set[int] = set()
        for c in self.cells():
            if c.piece is None:
                continue
            if c.piece.position != c.position or id(c.piece) in seen:
                return False
            seen.add(id(c.piece))
        return True

    def to_diagram(self) -> str:
        return diagram_from_rows([[c.piece for c in row] for row in self._cells])

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in self._cells:
            line = " ".join(str(c.piece) if c.piece else "." for c in row)
            rows.append(f"{row[0].position[0]} {line}")
        rows.append("  " + " ".join(str(col) for col in range(self._size)))
        return "\n".join(rows)


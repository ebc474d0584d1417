"""Text board diagrams: parsing and serialisation.

A diagram lists rows from row 0 to the last row, separated by ``/`` or
newlines.  Each row has one character per column: ``.`` (or a digit run
of empty cells, as in FEN) for an empty cell, otherwise a piece character
(uppercase = chess team, lowercase = checkers team).  A run may take
several digits on boards wider than nine columns::

    c.c.c.c./.c.c.c.c/c.c.c.c./8/8/8/PPPPPPPP/RNBQKBNR
"""

from __future__ import annotations

import re

from chesskers.core.piece import Piece
from chesskers.core.types import Position

STANDARD_DIAGRAM = "c.c.c.c./.c.c.c.c/c.c.c.c./8/8/8/PPPPPPPP/RNBQKBNR"

_ROW_SPLIT = re.compile(r"[/\n]")
_TOKEN = re.compile(r"\d+|.")


def diagram_rows(diagram: str) -> list[str]:
    """Split a diagram into its non-blank row strings."""
    return [row.strip() for row in _ROW_SPLIT.split(diagram) if row.strip()]


def pieces_from_diagram(diagram: str) -> tuple[int, list[tuple[Position, Piece]]]:
    """Parse *diagram* into ``(size, [(cell, piece), ...])``.

    The board must be square: as many columns per row as there are rows.
    """
    rows = diagram_rows(diagram)
    size = len(rows)
    if size == 0:
        raise ValueError("Empty board diagram")

    placed: list[tuple[Position, Piece]] = []
    for row, text in enumerate(rows):
        col = 0
        for ch in _TOKEN.findall(text):
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= size):
                    raise ValueError(f"Invalid empty run {ch!r}: {diagram!r}")
                col += step
            elif ch == ".":
                col += 1
            else:
                if col >= size:
                    raise ValueError(f"Invalid diagram row width: {text!r}")
                cell = (row, col)
                placed.append((cell, Piece.from_char(ch, cell)))
                col += 1
            if col > size:
                raise ValueError(f"Invalid diagram row width: {text!r}")
        if col != size:
            raise ValueError(f"Invalid diagram row width: {text!r}")
    return size, placed


def diagram_from_rows(rows: list[list[Piece | None]]) -> str:
    """Serialise a grid of optional pieces to a compact diagram."""
    out: list[str] = []
    for cells in rows:
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        out.append(row)
    return "/".join(out)

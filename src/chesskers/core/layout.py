"""Starting layouts as configuration tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesskers.core.notation import STANDARD_DIAGRAM, pieces_from_diagram
from chesskers.core.piece import Piece


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Immutable starting position, stored as a board diagram.

    Args:
        diagram: Rows from row 0 downwards (see :mod:`chesskers.core.notation`).
        name: Display name for the variant.
    """

    diagram: str = STANDARD_DIAGRAM
    name: str = "standard"
    _size: int = field(init=False, repr=False, compare=False)
    _checker_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Fail fast on a malformed table rather than at board creation.
        size, placed = pieces_from_diagram(self.diagram)
        object.__setattr__(self, "_size", size)
        object.__setattr__(
            self, "_checker_count", sum(1 for _cell, p in placed if p.is_checker)
        )

    @classmethod
    def standard(cls) -> BoardLayout:
        """Chess army on rows 6-7, twelve checkers on rows 0-2."""
        return cls()

    @classmethod
    def from_diagram(cls, diagram: str, name: str = "custom") -> BoardLayout:
        return cls(diagram, name)

    @property
    def size(self) -> int:
        return self._size

    def spawn(self) -> list[Piece]:
        """Fresh piece entities for this layout, positions already set."""
        return [piece for _cell, piece in pieces_from_diagram(self.diagram)[1]]

    @property
    def checker_count(self) -> int:
        """Checker-family pieces at start; the chess team wins by taking all."""
        return self._checker_count

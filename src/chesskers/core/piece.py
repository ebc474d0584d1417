"""Piece record and the declarative movement tables."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from chesskers.core.enums import MoveMode, PieceKind, Team
from chesskers.core.types import Position


@dataclass(frozen=True, slots=True)
class Delta:
    """Relative offset plus the mode the move generator applies it with."""

    d_row: int
    d_col: int
    mode: MoveMode

    def flipped(self) -> Delta:
        """Same delta mirrored along the row axis."""
        return Delta(-self.d_row, self.d_col, self.mode)


def _deltas(
    offsets: tuple[tuple[int, int], ...], mode: MoveMode
) -> tuple[Delta, ...]:
    return tuple(Delta(dr, dc, mode) for dr, dc in offsets)


ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KING_OFFSETS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

# Tables are written from the point of view of the team whose forward
# direction is the sign used here: pawns advance towards row 0 (chess),
# checkers towards the last row (checkers).
DELTA_TABLE: dict[PieceKind, tuple[Delta, ...]] = {
    PieceKind.PAWN: (
        Delta(-1, 0, MoveMode.EMPTY_ONLY),
        Delta(-1, -1, MoveMode.ATTACK_ONLY),
        Delta(-1, 1, MoveMode.ATTACK_ONLY),
    ),
    PieceKind.ROOK: _deltas(ROOK_DIRS, MoveMode.SLIDE),
    PieceKind.BISHOP: _deltas(BISHOP_DIRS, MoveMode.SLIDE),
    PieceKind.QUEEN: _deltas(ROOK_DIRS + BISHOP_DIRS, MoveMode.SLIDE),
    PieceKind.KING: _deltas(KING_OFFSETS, MoveMode.STEP),
    PieceKind.KNIGHT: _deltas(KNIGHT_OFFSETS, MoveMode.STEP),
    PieceKind.CHECKER: _deltas(((1, 1), (1, -1)), MoveMode.STEP),
    PieceKind.CROWNED_CHECKER: _deltas(BISHOP_DIRS, MoveMode.STEP),
}

# Sign of the row component in DELTA_TABLE for kinds that have a facing.
_TABLE_FORWARD: dict[PieceKind, int] = {
    PieceKind.PAWN: Team.CHESS.forward,
    PieceKind.CHECKER: Team.CHECKERS.forward,
}


def deltas_for(kind: PieceKind, team: Team) -> tuple[Delta, ...]:
    """Movement policy of *kind* when played by *team*."""
    table = DELTA_TABLE[kind]
    table_forward = _TABLE_FORWARD.get(kind)
    if table_forward is None or table_forward == team.forward:
        return table
    return tuple(d.flipped() for d in table)


# Diagram character ↔ (Team, PieceKind).  Uppercase = chess team.
_CHAR_MAP: dict[str, tuple[Team, PieceKind]] = {}
for _team, _case in ((Team.CHESS, str.upper), (Team.CHECKERS, str.lower)):
    for _char, _kind in (
        ("p", PieceKind.PAWN),
        ("n", PieceKind.KNIGHT),
        ("b", PieceKind.BISHOP),
        ("r", PieceKind.ROOK),
        ("q", PieceKind.QUEEN),
        ("k", PieceKind.KING),
        ("c", PieceKind.CHECKER),
        ("d", PieceKind.CROWNED_CHECKER),
    ):
        _CHAR_MAP[_case(_char)] = (_team, _kind)

_DIAGRAM_CHARS: dict[tuple[Team, PieceKind], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

_UNICODE: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
    PieceKind.CHECKER: "⛀",
    PieceKind.CROWNED_CHECKER: "⛁",
}

_uids = itertools.count(1)


@dataclass(eq=False, slots=True)
class Piece:
    """A single game piece.

    Pieces compare by identity: promotion creates a new entity, it never
    mutates ``kind`` in place.  ``uid`` is what presentation keys visuals on.
    """

    kind: PieceKind
    team: Team
    position: Position = (0, 0)
    has_moved: bool = False
    deltas: tuple[Delta, ...] = field(init=False)
    uid: int = field(init=False)

    def __post_init__(self) -> None:
        self.deltas = deltas_for(self.kind, self.team)
        self.uid = next(_uids)

    @property
    def is_checker(self) -> bool:
        return self.kind.is_checker

    def promoted(self, kind: PieceKind) -> Piece:
        """New piece of *kind* for the same team at the same cell."""
        return Piece(kind, self.team, self.position, has_moved=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = chess team, lowercase = checkers)."""
        return _DIAGRAM_CHARS[(self.team, self.kind)]

    def __repr__(self) -> str:
        return (
            f"Piece({self.kind.name}, {self.team.name}, {self.position}, uid={self.uid})"
        )

    @classmethod
    def from_char(cls, char: str, position: Position = (0, 0)) -> Piece:
        """Create piece from a diagram character, e.g. ``'c'`` → checker."""
        try:
            team, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, team, position)

    @property
    def symbol(self) -> str:
        """Unicode symbol for text front-ends."""
        return _UNICODE[self.kind]

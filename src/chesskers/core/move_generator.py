"""Destination generation from each piece's delta table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesskers.core.enums import MoveMode, PieceKind, Team
from chesskers.core.types import Position, offset

if TYPE_CHECKING:
    from chesskers.core.board import BoardState
    from chesskers.core.piece import Delta, Piece


class MoveGenerator:
    """Interprets movement policies against a :class:`BoardState`.

    Chess kinds go through the generic slide/step interpreter; the checker
    family uses a separate hop interpreter because a checker captures by
    jumping over the enemy rather than landing on it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardState) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(self, pos: Position, attack_only: bool = False) -> list[Position]:
        """Legal destinations of the piece on *pos* (empty list if none).

        *attack_only* restricts checker pieces to capturing hops; it has no
        effect on chess kinds.
        """
        piece = self._board.piece_at(pos)
        if piece is None:
            return []
        if piece.is_checker:
            return self._gen_checker(piece, attack_only)
        return self._gen_deltas(piece)

    def capture_destinations(self, pos: Position) -> list[Position]:
        """Hops available to a checker piece continuing a chain capture."""
        return self.destinations(pos, attack_only=True)

    def movable_pieces(self, team: Team) -> list[Piece]:
        """Pieces of *team* with at least one legal destination."""
        return [
            piece
            for piece in self._board.pieces(team)
            if self.destinations(piece.position)
        ]

    def has_moves(self, team: Team) -> bool:
        for piece in self._board.pieces(team):
            if self.destinations(piece.position):
                return True
        return False

    # -- Generic interpreter -----------------------------------------------

    def _gen_deltas(self, piece: Piece) -> list[Position]:
        moves: list[Position] = []
        for delta in piece.deltas:
            if delta.mode == MoveMode.SLIDE:
                self._gen_slide(piece, delta, moves)
                continue

            target = offset(piece.position, delta.d_row, delta.d_col)
            if not self._accepts(piece, target, delta.mode):
                continue
            moves.append(target)

            # Pawn double first step: probe one more cell along the same delta.
            if (
                delta.mode == MoveMode.EMPTY_ONLY
                and piece.kind == PieceKind.PAWN
                and not piece.has_moved
            ):
                further = offset(target, delta.d_row, delta.d_col)
                if self._accepts(piece, further, MoveMode.EMPTY_ONLY):
                    moves.append(further)
        return moves

    def _gen_slide(self, piece: Piece, delta: Delta, moves: list[Position]) -> None:
        board = self._board
        target = offset(piece.position, delta.d_row, delta.d_col)
        while board.check_on_board(target):
            occupant = board.piece_at(target)
            if occupant is None:
                moves.append(target)
                target = offset(target, delta.d_row, delta.d_col)
                continue
            if occupant.team != piece.team:
                moves.append(target)
            break

    def _accepts(self, piece: Piece, target: Position, mode: MoveMode) -> bool:
        board = self._board
        if not board.check_on_board(target):
            return False
        if mode == MoveMode.ATTACK_ONLY:
            return board.is_enemy(target, piece.team)
        if mode == MoveMode.EMPTY_ONLY:
            return board.is_empty(target)
        return board.is_empty(target) or board.is_enemy(target, piece.team)

    # -- Checker interpreter -----------------------------------------------

    def _gen_checker(self, piece: Piece, attack_only: bool) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        for delta in piece.deltas:
            step = offset(piece.position, delta.d_row, delta.d_col)
            if not board.check_on_board(step):
                continue
            if board.is_empty(step):
                if not attack_only:
                    moves.append(step)
                continue
            if board.is_enemy(step, piece.team):
                hop = offset(step, delta.d_row, delta.d_col)
                if board.check_on_board(hop) and board.is_empty(hop):
                    moves.append(hop)
        return moves

"""Tests for Piece and the movement tables."""

import pytest

from chesskers.core.enums import MoveMode, PieceKind, Team
from chesskers.core.piece import DELTA_TABLE, Delta, Piece, deltas_for


class TestDeltaTables:
    def test_pawn_table(self) -> None:
        assert DELTA_TABLE[PieceKind.PAWN] == (
            Delta(-1, 0, MoveMode.EMPTY_ONLY),
            Delta(-1, -1, MoveMode.ATTACK_ONLY),
            Delta(-1, 1, MoveMode.ATTACK_ONLY),
        )

    def test_queen_is_rook_plus_bishop(self) -> None:
        queen = set(DELTA_TABLE[PieceKind.QUEEN])
        assert queen == set(DELTA_TABLE[PieceKind.ROOK]) | set(
            DELTA_TABLE[PieceKind.BISHOP]
        )

    def test_sliders_slide(self) -> None:
        for kind in (PieceKind.ROOK, PieceKind.BISHOP, PieceKind.QUEEN):
            assert all(d.mode == MoveMode.SLIDE for d in DELTA_TABLE[kind])

    def test_king_and_knight_step(self) -> None:
        for kind in (PieceKind.KING, PieceKind.KNIGHT):
            deltas = DELTA_TABLE[kind]
            assert len(deltas) == 8
            assert all(d.mode == MoveMode.STEP for d in deltas)

    def test_checker_moves_towards_higher_rows(self) -> None:
        assert {(d.d_row, d.d_col) for d in DELTA_TABLE[PieceKind.CHECKER]} == {
            (1, 1),
            (1, -1),
        }

    def test_crowned_checker_moves_all_diagonals(self) -> None:
        offsets = {(d.d_row, d.d_col) for d in DELTA_TABLE[PieceKind.CROWNED_CHECKER]}
        assert offsets == {(1, 1), (1, -1), (-1, 1), (-1, -1)}


class TestDeltasFor:
    def test_home_teams_use_table_as_is(self) -> None:
        assert deltas_for(PieceKind.PAWN, Team.CHESS) == DELTA_TABLE[PieceKind.PAWN]
        assert (
            deltas_for(PieceKind.CHECKER, Team.CHECKERS)
            == DELTA_TABLE[PieceKind.CHECKER]
        )

    def test_pawn_of_checkers_team_faces_down(self) -> None:
        assert all(d.d_row == 1 for d in deltas_for(PieceKind.PAWN, Team.CHECKERS))

    def test_checker_of_chess_team_faces_up(self) -> None:
        assert all(d.d_row == -1 for d in deltas_for(PieceKind.CHECKER, Team.CHESS))

    def test_symmetric_kinds_never_flip(self) -> None:
        assert deltas_for(PieceKind.ROOK, Team.CHECKERS) == DELTA_TABLE[PieceKind.ROOK]


class TestPiece:
    def test_identity_equality(self) -> None:
        a = Piece(PieceKind.CHECKER, Team.CHECKERS, (2, 0))
        b = Piece(PieceKind.CHECKER, Team.CHECKERS, (2, 0))
        assert a != b
        assert a.uid != b.uid

    def test_promoted_is_new_entity(self) -> None:
        pawn = Piece(PieceKind.PAWN, Team.CHESS, (0, 3))
        queen = pawn.promoted(PieceKind.QUEEN)
        assert queen is not pawn
        assert queen.kind == PieceKind.QUEEN
        assert queen.team == Team.CHESS
        assert queen.deltas == DELTA_TABLE[PieceKind.QUEEN]
        assert pawn.kind == PieceKind.PAWN

    @pytest.mark.parametrize(
        ("char", "team", "kind"),
        [
            ("K", Team.CHESS, PieceKind.KING),
            ("P", Team.CHESS, PieceKind.PAWN),
            ("c", Team.CHECKERS, PieceKind.CHECKER),
            ("d", Team.CHECKERS, PieceKind.CROWNED_CHECKER),
            ("q", Team.CHECKERS, PieceKind.QUEEN),
        ],
    )
    def test_from_char(self, char: str, team: Team, kind: PieceKind) -> None:
        piece = Piece.from_char(char, (4, 4))
        assert (piece.team, piece.kind, piece.position) == (team, kind, (4, 4))
        assert str(piece) == char

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_checker_family(self) -> None:
        assert Piece(PieceKind.CROWNED_CHECKER, Team.CHECKERS).is_checker
        assert not Piece(PieceKind.KING, Team.CHESS).is_checker

    def test_symbol(self) -> None:
        assert Piece(PieceKind.CHECKER, Team.CHECKERS).symbol == "⛀"
        assert Piece(PieceKind.KING, Team.CHESS).symbol == "♚"

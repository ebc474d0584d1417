"""TurnEngine — selection, move resolution and the turn state machine.

The engine owns the :class:`BoardState`.  A presentation layer drives it
with two intents, ``select(cell)`` and ``move_to(cell)``, and renders the
events it emits (see :mod:`chesskers.game.events`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesskers.core.board import BoardState
from chesskers.core.enums import GameEndReason, PieceKind, Team
from chesskers.core.errors import (
    IllegalMoveError,
    InvalidSelectionError,
    NoPieceSelectedError,
    OutOfBoundsError,
)
from chesskers.core.move_generator import MoveGenerator
from chesskers.core.piece import Piece
from chesskers.core.types import Position, cell_name, midpoint
from chesskers.game.events import (
    ChainCaptureContinues,
    EngineEvent,
    EngineEvents,
    GameEnded,
    PieceCaptured,
    PieceMoved,
    PiecePromoted,
    SelectionChanged,
    TurnChanged,
)
from chesskers.game.interfaces import GamePhase, ITurnEngine, Selectable
from chesskers.game.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)

# Kind a piece turns into on reaching its far row.
_PROMOTIONS: dict[PieceKind, PieceKind] = {
    PieceKind.PAWN: PieceKind.QUEEN,
    PieceKind.CHECKER: PieceKind.CROWNED_CHECKER,
}


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    team: Team
    kind: PieceKind
    from_cell: Position
    to_cell: Position
    diagram_after: str
    captured: PieceKind | None = None
    promoted_to: PieceKind | None = None
    chain_continues: bool = False


@dataclass
class MoveOutcome:
    """Everything one ``move_to`` changed, events in emission order."""

    record: MoveRecord
    events: list[EngineEvent] = field(default_factory=list)

    @property
    def captured(self) -> PieceCaptured | None:
        return next((e for e in self.events if isinstance(e, PieceCaptured)), None)

    @property
    def promoted(self) -> PiecePromoted | None:
        return next((e for e in self.events if isinstance(e, PiecePromoted)), None)

    @property
    def chain_continues(self) -> bool:
        return any(isinstance(e, ChainCaptureContinues) for e in self.events)

    @property
    def game_ended(self) -> GameEnded | None:
        return next((e for e in self.events if isinstance(e, GameEnded)), None)


class TurnEngine(ITurnEngine):
    """Orchestrates a game: validates intents, applies moves, switches turns,
    notifies listeners.

    Single-threaded: every call runs to completion before the next one and
    listeners are invoked only after the board is fully updated.
    """

    __slots__ = (
        "_settings",
        "_first_team",
        "_board",
        "_gen",
        "_phase",
        "_current_team",
        "_selected",
        "_destinations",
        "_captured_checkers",
        "_total_checkers",
        "_winner",
        "_reason",
        "_history",
        "events",
    )

    def __init__(
        self,
        settings: EngineSettings | None = None,
        first_team: Team = Team.CHECKERS,
    ) -> None:
        self._settings = settings if settings is not None else EngineSettings()
        self._first_team = first_team
        self._board = BoardState(self._settings.layout)
        self._gen = MoveGenerator(self._board)
        self._history: list[MoveRecord] = []
        self.events = EngineEvents()
        self._start(first_team)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def move_generator(self) -> MoveGenerator:
        return self._gen

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_team(self) -> Team | None:
        """Team to move, ``None`` once the game is over."""
        return self._current_team

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Team | None:
        return self._winner

    @property
    def game_over_reason(self) -> GameEndReason | None:
        return self._reason

    @property
    def captured_checkers_count(self) -> int:
        return self._captured_checkers

    @property
    def total_checkers(self) -> int:
        """Checker-family pieces the layout started with."""
        return self._total_checkers

    @property
    def selected_cell(self) -> Position | None:
        return self._selected

    @property
    def selected_piece(self) -> Piece | None:
        """The selected piece, looked up through the board on every access."""
        if self._selected is None:
            return None
        return self._board.piece_at(self._selected)

    @property
    def legal_destinations(self) -> tuple[Position, ...]:
        return self._destinations

    @property
    def history(self) -> list[MoveRecord]:
        return self._history

    # ── ITurnEngine impl ─────────────────────────────────────────────────

    def new_game(self, first_team: Team | None = None) -> None:
        """Reset the board; *first_team* defaults to the side the engine was
        built with."""
        if first_team is None:
            first_team = self._first_team
        self._board.reset()
        self._history.clear()
        self._start(first_team)
        self.events.emit(TurnChanged(first_team))

    def select(self, pos: Position) -> tuple[Position, ...]:
        if self._phase == GamePhase.GAME_OVER:
            raise InvalidSelectionError("The game is over")
        piece = self._board.piece_at(pos)
        if piece is None:
            raise InvalidSelectionError(f"No piece on {cell_name(pos)}")
        if piece.team != self._current_team:
            raise InvalidSelectionError(
                f"{piece.kind.name.lower()} on {cell_name(pos)} belongs to {piece.team}, "
                f"it is {self._current_team}'s turn"
            )
        if self._phase == GamePhase.CHAIN_CAPTURE:
            if pos != self._selected:
                raise InvalidSelectionError(
                    f"Chain capture in progress: the piece on "
                    f"{cell_name(self._selected)} must keep capturing"
                )
            return self._destinations

        destinations = tuple(self._gen.destinations(pos))
        self._set_selection(pos, destinations, GamePhase.PIECE_SELECTED)
        _LOGGER.debug(
            "Selected %s on %s: %d destination(s)",
            piece.kind.name,
            cell_name(pos),
            len(destinations),
        )
        self.events.emit(SelectionChanged(piece, destinations))
        return destinations

    def deselect(self) -> None:
        if self._phase == GamePhase.CHAIN_CAPTURE:
            raise InvalidSelectionError("Cannot drop the selection mid chain capture")
        if self._selected is None:
            return
        self._clear_selection()
        self.events.emit(SelectionChanged(None))

    def move_to(self, pos: Position) -> MoveOutcome:
        if self._selected is None or self._phase not in (
            GamePhase.PIECE_SELECTED,
            GamePhase.CHAIN_CAPTURE,
        ):
            raise NoPieceSelectedError("Select a piece before moving")
        if not self._board.check_on_board(pos):
            raise OutOfBoundsError(f"{pos} is off the board")

        chaining = self._phase == GamePhase.CHAIN_CAPTURE
        if self._settings.validate_destinations:
            legal = self._gen.destinations(self._selected, attack_only=chaining)
            if pos not in legal:
                raise IllegalMoveError(
                    f"{cell_name(pos)} is not a legal destination from "
                    f"{cell_name(self._selected)}"
                )

        board = self._board
        piece = board.piece_at(self._selected)
        assert piece is not None, "selection points at an empty cell"
        origin = piece.position
        events: list[EngineEvent] = [PieceMoved(piece, origin, pos)]

        # 1-3. Lift the piece, then take whatever sits on the capture square.
        board.remove(origin)
        capture_sq = midpoint(origin, pos) if piece.is_checker else pos
        captured = board.remove(capture_sq) if capture_sq is not None else None
        if captured is not None:
            if captured.is_checker:
                self._captured_checkers += 1
            events.append(PieceCaptured(captured, capture_sq))

        # 4-5. Promotion swaps in a new entity; then land on the destination.
        placed = piece
        promotion = _PROMOTIONS.get(piece.kind)
        if promotion is not None and pos[0] == self._far_row(piece.team):
            placed = piece.promoted(promotion)
            events.append(PiecePromoted(piece, placed))
        board.place(pos, placed)
        placed.has_moved = True

        _LOGGER.debug(
            "%s %s %s -> %s%s",
            piece.team,
            piece.kind.name,
            cell_name(origin),
            cell_name(pos),
            f" x {captured.kind.name}" if captured is not None else "",
        )

        record = MoveRecord(
            team=piece.team,
            kind=piece.kind,
            from_cell=origin,
            to_cell=pos,
            diagram_after=board.to_diagram(),
            captured=captured.kind if captured is not None else None,
            promoted_to=placed.kind if placed is not piece else None,
        )
        self._history.append(record)

        # 6. Taking the king ends the game on the spot.
        if captured is not None and captured.kind == PieceKind.KING:
            events.append(self._finish(placed.team, GameEndReason.KING_CAPTURED))
            return self._publish(record, events)

        # 7. A checker that just captured keeps going while it can.
        if captured is not None and placed.is_checker:
            hops = tuple(self._gen.capture_destinations(pos))
            if hops:
                record.chain_continues = True
                self._set_selection(pos, hops, GamePhase.CHAIN_CAPTURE)
                _LOGGER.debug("Chain capture continues from %s", cell_name(pos))
                events.append(ChainCaptureContinues(placed, hops))
                return self._publish(record, events)

        # 8-9. Look for the other ways a game ends, else hand the turn over.
        next_team = piece.team.opposite
        if self._total_checkers and self._captured_checkers >= self._total_checkers:
            events.append(self._finish(Team.CHESS, GameEndReason.ALL_CHECKERS_CAPTURED))
        elif self._settings.end_on_no_moves and not self._gen.has_moves(next_team):
            events.append(self._finish(piece.team, GameEndReason.NO_LEGAL_MOVES))
        else:
            self._clear_selection()
            self._current_team = next_team
            events.append(TurnChanged(next_team))
            events.append(SelectionChanged(None))
        return self._publish(record, events)

    def selectable(self) -> Selectable:
        if self._phase == GamePhase.GAME_OVER or self._current_team is None:
            return Selectable()
        if self._phase == GamePhase.CHAIN_CAPTURE:
            piece = self.selected_piece
            assert piece is not None
            return Selectable(cells=self._destinations, pieces=(piece,))
        return Selectable(
            cells=tuple(self._board.active_cells()),
            pieces=tuple(self._board.pieces(self._current_team)),
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start(self, first_team: Team) -> None:
        self._phase = GamePhase.AWAITING_SELECTION
        self._current_team: Team | None = first_team
        self._selected: Position | None = None
        self._destinations: tuple[Position, ...] = ()
        self._captured_checkers = 0
        self._total_checkers = self._settings.layout.checker_count
        self._winner: Team | None = None
        self._reason: GameEndReason | None = None
        self._board.clear_highlights()

    def _far_row(self, team: Team) -> int:
        return 0 if team.forward < 0 else self._board.size - 1

    def _set_selection(
        self, pos: Position, destinations: tuple[Position, ...], phase: GamePhase
    ) -> None:
        self._selected = pos
        self._destinations = destinations
        self._phase = phase
        self._board.set_active(destinations)

    def _clear_selection(self) -> None:
        self._selected = None
        self._destinations = ()
        self._board.clear_highlights()
        if self._phase != GamePhase.GAME_OVER:
            self._phase = GamePhase.AWAITING_SELECTION

    def _finish(self, winner: Team, reason: GameEndReason) -> GameEnded:
        self._clear_selection()
        self._phase = GamePhase.GAME_OVER
        self._current_team = None
        self._winner = winner
        self._reason = reason
        _LOGGER.info("Game over: %s wins (%s)", winner, reason)
        return GameEnded(winner, reason)

    def _publish(self, record: MoveRecord, events: list[EngineEvent]) -> MoveOutcome:
        for event in events:
            self.events.emit(event)
        return MoveOutcome(record, events)

"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesskers.core.layout import BoardLayout


@dataclass
class EngineSettings:
    """All rule switches a game is created with."""

    layout: BoardLayout = field(default_factory=BoardLayout.standard)

    # Re-derive legality inside move_to instead of trusting the caller.
    validate_destinations: bool = True

    # A side left without any legal move loses instead of stalling the game.
    end_on_no_moves: bool = True

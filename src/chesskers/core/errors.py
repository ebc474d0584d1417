"""Exceptions raised by the rules engine.

All of them are raised before any board mutation, so a caller can catch
one and keep using the engine.
"""

from __future__ import annotations


class ChesskersError(Exception):
    """Base class for every rules-engine error."""


class OutOfBoundsError(ChesskersError, IndexError):
    """A cell lies outside the board grid."""


class InvalidSelectionError(ChesskersError):
    """Selection refused: empty cell, wrong team or game already over."""


class IllegalMoveError(InvalidSelectionError):
    """Destination is not among the selected piece's legal moves."""


class NoPieceSelectedError(ChesskersError):
    """A move was requested without an active selection."""

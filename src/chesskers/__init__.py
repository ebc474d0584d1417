"""Chesskers — rules engine for a chess-versus-checkers board game."""

__version__ = "0.1.0"

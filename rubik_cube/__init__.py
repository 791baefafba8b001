"""Rubik 3x3 cube engine package."""

from .actions import Axis, Face, InvalidMoveError, Move, parse_moves
from .engine import Phase, RubiksCube
from .solved_check import is_solved

__all__ = ["Axis", "Face", "InvalidMoveError", "Move", "Phase", "RubiksCube", "is_solved", "parse_moves"]

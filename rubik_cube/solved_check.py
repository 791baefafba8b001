"""Solved-state checks for the Rubik cube."""

from __future__ import annotations

import numpy as np

from .state_codec import StateValidationError, validate_state

CENTER = 4


def is_solved(state: str | list | np.ndarray) -> bool:
    """True when every sticker of every face matches that face's centre."""
    arr = validate_state(state)
    return bool(np.all(arr == arr[:, CENTER : CENTER + 1]))


def assert_valid_and_solved(state: str | list | np.ndarray) -> None:
    if not is_solved(state):
        raise StateValidationError("State is valid but not solved")

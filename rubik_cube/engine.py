"""Core 3x3 Rubik cube state and move application."""

from __future__ import annotations

import enum
import logging
from typing import Iterable

import numpy as np

from .actions import STANDARD_MOVES, Face, Move, format_moves, parse_moves, to_move
from .rotations import apply_move_to_grid
from .solved_check import is_solved
from .state_codec import StateValidationError, solved_state, validate_state

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_STEPS = 30


class Phase(enum.Enum):
    """Which move history a move is recorded in."""

    SCRAMBLE = "scramble"
    SOLVE = "solve"


class RubiksCube:
    """Sticker grid of a 3x3 cube plus the scramble and solve move histories.

    Not thread-safe: callers sharing a cube must serialize access.
    """

    def __init__(self, initial_state: str | list | np.ndarray | None = None, seed: int | None = None):
        self._rng = np.random.default_rng(seed)
        self._state = solved_state()
        self.scramble_history: list[Move] = []
        self.solve_history: list[Move] = []
        self.reset(initial_state)

    def _history(self, phase: Phase) -> list[Move]:
        if phase is Phase.SCRAMBLE:
            return self.scramble_history
        if phase is Phase.SOLVE:
            return self.solve_history
        raise StateValidationError(f"Unknown phase: {phase!r}")

    def get_state(self) -> np.ndarray:
        """Return a copy of the ``(6, 9)`` sticker grid."""
        return self._state.copy()

    def face(self, face: Face) -> np.ndarray:
        return self._state[Face(face)].copy()

    def history(self, phase: Phase = Phase.SOLVE) -> list[Move]:
        return list(self._history(phase))

    def set_state(self, state: str | list | np.ndarray) -> np.ndarray:
        arr = validate_state(state)
        self._state = arr
        self.scramble_history.clear()
        self.solve_history.clear()
        return self._state.copy()

    def reset(self, state: str | list | np.ndarray | None = None) -> np.ndarray:
        """Return to the solved grid (or ``state``) and clear both histories."""
        self._state = solved_state() if state is None else validate_state(state)
        self.scramble_history.clear()
        self.solve_history.clear()
        logger.debug("cube reset (%s)", "solved" if state is None else "custom state")
        return self._state.copy()

    def is_solved(self) -> bool:
        return is_solved(self._state)

    def apply_move(self, move: Move | str, phase: Phase = Phase.SOLVE) -> None:
        """Turn the cube and record ``move`` in the history of ``phase``.

        ``Move.NONE`` changes nothing and is not recorded.
        """
        move = to_move(move)
        history = self._history(phase)
        if move is Move.NONE:
            return
        apply_move_to_grid(self._state, move)
        history.append(move)

    def apply_moves(self, moves: str | Iterable[Move | str], phase: Phase = Phase.SOLVE) -> None:
        if isinstance(moves, str):
            moves = parse_moves(moves)
        for move in moves:
            self.apply_move(move, phase)

    def undo_last(self, phase: Phase = Phase.SOLVE) -> Move | None:
        """Revert the most recent move of ``phase``; no-op on an empty history."""
        history = self._history(phase)
        if not history:
            return None
        move = history.pop()
        apply_move_to_grid(self._state, move.inverse())
        logger.debug("undo %s from %s history", move, phase.value)
        return move

    def scramble(self, steps: int = DEFAULT_SCRAMBLE_STEPS, seed: int | None = None) -> list[Move]:
        if not isinstance(steps, int) or isinstance(steps, bool) or steps < 0:
            raise StateValidationError("Scramble steps must be a non-negative integer")

        rng = np.random.default_rng(seed) if seed is not None else self._rng
        moves = [STANDARD_MOVES[int(i)] for i in rng.integers(len(STANDARD_MOVES), size=steps)]
        for move in moves:
            self.apply_move(move, Phase.SCRAMBLE)

        logger.debug("scrambled with %d moves: %s", steps, format_moves(moves))
        return moves

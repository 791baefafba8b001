"""Pluggable solving strategies."""

from __future__ import annotations

import abc
import logging

from .actions import Move, format_moves
from .engine import Phase, RubiksCube

logger = logging.getLogger(__name__)


class Solver(abc.ABC):
    """A strategy that looks at a cube and proposes the moves that solve it."""

    @abc.abstractmethod
    def solve(self, cube: RubiksCube) -> list[Move]:
        raise NotImplementedError


class ScrambleReversalSolver(Solver):
    """Undoes the recorded scramble: inverse moves in reverse order."""

    def solve(self, cube: RubiksCube) -> list[Move]:
        return [move.inverse() for move in reversed(cube.history(Phase.SCRAMBLE))]


def run_solver(cube: RubiksCube, solver: Solver) -> bool:
    """Apply the solver's moves to the solve history and report whether the cube is solved."""
    moves = solver.solve(cube)
    for move in moves:
        cube.apply_move(move, Phase.SOLVE)
    logger.debug("%s applied %d moves: %s", type(solver).__name__, len(moves), format_moves(moves))
    return cube.is_solved()

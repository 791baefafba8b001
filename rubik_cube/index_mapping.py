"""Sticker index mappings between faces for whole-cube quarter rotations.

``map_index(axis, source, dest, i)`` answers: if the cube is turned about
``axis`` until ``source`` sits where ``dest`` was, at which position of ``dest``
does sticker ``i`` of ``source`` end up?  Every face keeps the viewing frame
listed in ``geometry.FACE_SPECS``, so the answer is always one of four grid
permutations.
"""

from __future__ import annotations

import numpy as np

from .actions import Axis, Face

IDENTITY = (0, 1, 2, 3, 4, 5, 6, 7, 8)
HALF_TURN = (8, 7, 6, 5, 4, 3, 2, 1, 0)
CLOCKWISE = (2, 5, 8, 1, 4, 7, 0, 3, 6)
COUNTERCLOCKWISE = (6, 3, 0, 7, 4, 1, 8, 5, 2)

UNREACHABLE = None

T, BO, FR, BA, LE, RI = Face.TOP, Face.BOTTOM, Face.FRONT, Face.BACK, Face.LEFT, Face.RIGHT

# (source, dest) -> permutation, per axis. Pairs missing here are unreachable.
_REACHABLE: dict[Axis, dict[tuple[Face, Face], tuple[int, ...]]] = {
    Axis.Y: {
        (T, T): IDENTITY,
        (BO, BO): IDENTITY,
        (FR, FR): IDENTITY, (FR, BA): IDENTITY, (FR, LE): IDENTITY, (FR, RI): IDENTITY,
        (BA, FR): IDENTITY, (BA, BA): IDENTITY, (BA, LE): IDENTITY, (BA, RI): IDENTITY,
        (LE, FR): IDENTITY, (LE, BA): IDENTITY, (LE, LE): IDENTITY, (LE, RI): IDENTITY,
        (RI, FR): IDENTITY, (RI, BA): IDENTITY, (RI, LE): IDENTITY, (RI, RI): IDENTITY,
    },
    Axis.X: {
        (T, T): IDENTITY, (T, BO): IDENTITY, (T, FR): IDENTITY, (T, BA): HALF_TURN,
        (BO, T): IDENTITY, (BO, BO): IDENTITY, (BO, FR): IDENTITY, (BO, BA): HALF_TURN,
        (FR, T): IDENTITY, (FR, BO): IDENTITY, (FR, FR): IDENTITY, (FR, BA): HALF_TURN,
        (BA, T): HALF_TURN, (BA, BO): HALF_TURN, (BA, FR): HALF_TURN, (BA, BA): IDENTITY,
        (LE, LE): IDENTITY,
        (RI, RI): IDENTITY,
    },
    Axis.Z: {
        (T, T): IDENTITY, (T, BO): HALF_TURN, (T, LE): COUNTERCLOCKWISE, (T, RI): CLOCKWISE,
        (BO, T): HALF_TURN, (BO, BO): IDENTITY, (BO, LE): CLOCKWISE, (BO, RI): COUNTERCLOCKWISE,
        (FR, FR): IDENTITY,
        (BA, BA): IDENTITY,
        (LE, T): CLOCKWISE, (LE, BO): COUNTERCLOCKWISE, (LE, LE): IDENTITY, (LE, RI): HALF_TURN,
        (RI, T): COUNTERCLOCKWISE, (RI, BO): CLOCKWISE, (RI, LE): HALF_TURN, (RI, RI): IDENTITY,
    },
}


class UnreachableMappingError(ValueError):
    """Raised when no rotation about the axis carries one face onto the other."""


def _frozen(perm: tuple[int, ...]) -> np.ndarray:
    arr = np.array(perm, dtype=np.intp)
    arr.flags.writeable = False
    return arr


def _build_index_mappings() -> dict[tuple[Axis, Face, Face], np.ndarray | None]:
    table: dict[tuple[Axis, Face, Face], np.ndarray | None] = {}
    for axis in Axis:
        for source in Face:
            for dest in Face:
                perm = _REACHABLE[axis].get((source, dest))
                table[(axis, source, dest)] = UNREACHABLE if perm is None else _frozen(perm)
    return table


INDEX_MAPPINGS = _build_index_mappings()

# Faces a quarter turn about each axis carries around, in turning order.
AXIS_RINGS = {
    Axis.Y: (FR, RI, BA, LE),
    Axis.X: (T, FR, BO, BA),
    Axis.Z: (T, RI, BO, LE),
}


def is_reachable(axis: Axis, source: Face, dest: Face) -> bool:
    return INDEX_MAPPINGS[(axis, source, dest)] is not UNREACHABLE


def mapping(axis: Axis, source: Face, dest: Face) -> np.ndarray:
    perm = INDEX_MAPPINGS[(axis, source, dest)]
    if perm is UNREACHABLE:
        raise UnreachableMappingError(
            f"{Face(source).name} cannot reach {Face(dest).name} about axis {Axis(axis).name}"
        )
    return perm


def map_index(axis: Axis, source: Face, dest: Face, index):
    """Map sticker position(s) ``index`` on ``source`` to positions on ``dest``.

    ``index`` may be an int or an integer array; the result has the same shape.
    """
    perm = mapping(axis, source, dest)
    if isinstance(index, (int, np.integer)):
        return int(perm[index])
    return perm[np.asarray(index, dtype=np.intp)]

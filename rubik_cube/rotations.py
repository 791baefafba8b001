"""In-place rotation primitives and the move interpreter.

All functions operate on a ``(6, 9)`` numpy grid and only permute its values,
so they work the same for color characters and integer sticker ids.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .actions import (
    STATE_SIZE,
    Axis,
    BandKind,
    BandTurn,
    Face,
    FaceTurn,
    Move,
    Primitive,
    quarter_move_sequence,
    to_move,
)
from .index_mapping import CLOCKWISE, COUNTERCLOCKWISE, map_index

_CLOCKWISE_DEST = np.array(CLOCKWISE, dtype=np.intp)
_COUNTERCLOCKWISE_DEST = np.array(COUNTERCLOCKWISE, dtype=np.intp)

# Faces that replace the starting face, in order, for a non-reversed band turn.
ROW_FACE_ORDER = (Face.RIGHT, Face.BACK, Face.LEFT)
LEFT_RIGHT_FACE_ORDER = (Face.TOP, Face.BACK, Face.BOTTOM)
FRONT_BACK_FACE_ORDER = (Face.LEFT, Face.BOTTOM, Face.RIGHT)


def rotate_face(grid: np.ndarray, face: Face, reverse: bool = False) -> None:
    """Turn the nine stickers of ``face`` a quarter turn, clockwise seen from outside."""
    dest = _COUNTERCLOCKWISE_DEST if reverse else _CLOCKWISE_DEST
    grid[face, dest] = grid[face].copy()


def rotate_edges(
    grid: np.ndarray,
    i1: int,
    i2: int,
    i3: int,
    face_cycle: Sequence[Face],
    starting_face: Face,
    axis: Axis,
) -> None:
    """Cycle one band of three stickers through ``starting_face`` and ``face_cycle``.

    Each face receives the band of the face that follows it in the cycle; the
    last face receives the starting face's original band. Indices are given in
    the starting face's frame and translated with the index mapping table.
    """
    indices = np.array((i1, i2, i3), dtype=np.intp)
    saved = grid[starting_face, indices].copy()

    face_to_set = starting_face
    for next_face in face_cycle:
        source = map_index(axis, starting_face, next_face, indices)
        target = map_index(axis, next_face, face_to_set, source)
        grid[face_to_set, target] = grid[next_face, source]
        face_to_set = next_face

    grid[face_to_set, map_index(axis, starting_face, face_to_set, indices)] = saved


def _order(order: tuple[Face, ...], reverse: bool) -> tuple[Face, ...]:
    return order[::-1] if reverse else order


def rotate_row_edges(grid: np.ndarray, row: int, reverse: bool = False) -> None:
    """Turn a horizontal layer; row 0 is next to TOP. Front moves to the left."""
    start = row * 3
    rotate_edges(grid, start, start + 1, start + 2, _order(ROW_FACE_ORDER, reverse), Face.FRONT, Axis.Y)


def rotate_left_right_column_edges(grid: np.ndarray, column: int, reverse: bool = False) -> None:
    """Turn a vertical layer seen from the front; columns run left to right. Top moves to the front."""
    rotate_edges(
        grid,
        column,
        3 + column,
        6 + column,
        _order(LEFT_RIGHT_FACE_ORDER, reverse),
        Face.FRONT,
        Axis.X,
    )


def rotate_back_front_column_edges(grid: np.ndarray, band: int, reverse: bool = False) -> None:
    """Turn a layer parallel to FRONT; band 0 is next to BACK. Top moves to the right."""
    start = band * 3
    rotate_edges(
        grid,
        start,
        start + 1,
        start + 2,
        _order(FRONT_BACK_FACE_ORDER, reverse),
        Face.TOP,
        Axis.Z,
    )


_BAND_ROTATIONS = {
    BandKind.ROW: rotate_row_edges,
    BandKind.COLUMN: rotate_left_right_column_edges,
    BandKind.SLICE: rotate_back_front_column_edges,
}


def apply_primitive(grid: np.ndarray, primitive: Primitive) -> None:
    if isinstance(primitive, FaceTurn):
        rotate_face(grid, primitive.face, primitive.reverse)
    elif isinstance(primitive, BandTurn):
        _BAND_ROTATIONS[primitive.kind](grid, primitive.layer, primitive.reverse)
    else:
        raise TypeError(f"Unsupported primitive: {primitive!r}")


def apply_move_to_grid(grid: np.ndarray, move: Move | str) -> np.ndarray:
    """Apply ``move`` to ``grid`` in place and return the grid."""
    for primitive in quarter_move_sequence(to_move(move)):
        apply_primitive(grid, primitive)
    return grid


def move_permutation(move: Move | str) -> np.ndarray:
    """Return ``p`` with ``new_flat = old_flat[p]`` for ``move``."""
    ids = np.arange(STATE_SIZE, dtype=np.int32).reshape(len(Face), -1)
    return apply_move_to_grid(ids, move).reshape(-1)


MOVE_PERMUTATIONS = {move: move_permutation(move) for move in Move}

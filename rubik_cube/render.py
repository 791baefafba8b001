"""Plain-text rendering of the sticker grid."""

from __future__ import annotations

import numpy as np

from .actions import FACE_NAMES, FACE_SIZE, Face

FACE_PRINT_ORDER = (Face.FRONT, Face.LEFT, Face.BACK, Face.RIGHT, Face.TOP, Face.BOTTOM)

# Faces in the middle band of the unfolded net, left to right.
NET_BAND = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)


def _face_rows(grid: np.ndarray, face: Face) -> list[str]:
    stickers = [str(v) for v in grid[face]]
    return [" ".join(stickers[r * FACE_SIZE : (r + 1) * FACE_SIZE]) for r in range(FACE_SIZE)]


def format_face(grid: np.ndarray, face: Face) -> str:
    return "\n".join([f"{FACE_NAMES[Face(face)]} face:"] + _face_rows(grid, face))


def format_cube(grid: np.ndarray) -> str:
    return "\n".join(format_face(grid, face) for face in FACE_PRINT_ORDER)


def format_net(grid: np.ndarray) -> str:
    """Unfolded cross: TOP above FRONT, BOTTOM below it, LEFT FRONT RIGHT BACK in a band."""
    top = _face_rows(grid, Face.TOP)
    bottom = _face_rows(grid, Face.BOTTOM)
    band = [_face_rows(grid, face) for face in NET_BAND]
    pad = " " * (len(top[0]) + 1)

    lines = [pad + row for row in top]
    lines += [" ".join(rows[r] for rows in band) for r in range(FACE_SIZE)]
    lines += [pad + row for row in bottom]
    return "\n".join(lines)

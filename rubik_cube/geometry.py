"""Vector model of the 54 stickers, used as an independent reference for moves."""

from __future__ import annotations

import numpy as np

from .actions import ALL_MOVES, FACE_SIZE, STATE_SIZE, STICKERS_PER_FACE, Face, Move

# Face specification from outside view.
FACE_SPECS = {
    Face.TOP: {"normal": (0, 1, 0), "right": (1, 0, 0), "up": (0, 0, -1)},
    Face.BOTTOM: {"normal": (0, -1, 0), "right": (1, 0, 0), "up": (0, 0, 1)},
    Face.FRONT: {"normal": (0, 0, 1), "right": (1, 0, 0), "up": (0, 1, 0)},  # frontal face
    Face.BACK: {"normal": (0, 0, -1), "right": (-1, 0, 0), "up": (0, 1, 0)},
    Face.LEFT: {"normal": (-1, 0, 0), "right": (0, 0, 1), "up": (0, 1, 0)},
    Face.RIGHT: {"normal": (1, 0, 0), "right": (0, 0, -1), "up": (0, 1, 0)},
}

AXIS_INDEX = {"x": 0, "y": 1, "z": 2}

# Base move -> (axis, turning layers, angle of the clockwise quarter turn).
# Angles follow the right-hand rule around the positive world axis.
LAYER_TURNS = {
    "U": ("y", (1,), -90),
    "D": ("y", (-1,), +90),
    "E": ("y", (0,), +90),
    "R": ("x", (1,), -90),
    "L": ("x", (-1,), +90),
    "M": ("x", (0,), +90),
    "F": ("z", (1,), -90),
    "B": ("z", (-1,), +90),
    "S": ("z", (0,), -90),
    "Uw": ("y", (1, 0), -90),
    "Dw": ("y", (-1, 0), +90),
    "Rw": ("x", (1, 0), -90),
    "Lw": ("x", (-1, 0), +90),
    "Fw": ("z", (1, 0), -90),
    "Bw": ("z", (-1, 0), +90),
}


def rotation_matrix(axis: str, angle_deg: int) -> np.ndarray:
    """Return integer rotation matrix for +-90 around x/y/z axes."""
    if axis == "x" and angle_deg == +90:
        return np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]], dtype=np.int8)
    if axis == "x" and angle_deg == -90:
        return np.array([[1, 0, 0], [0, 0, 1], [0, -1, 0]], dtype=np.int8)
    if axis == "y" and angle_deg == +90:
        return np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]], dtype=np.int8)
    if axis == "y" and angle_deg == -90:
        return np.array([[0, 0, -1], [0, 1, 0], [1, 0, 0]], dtype=np.int8)
    if axis == "z" and angle_deg == +90:
        return np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=np.int8)
    if axis == "z" and angle_deg == -90:
        return np.array([[0, 1, 0], [-1, 0, 0], [0, 0, 1]], dtype=np.int8)
    raise ValueError(f"Unsupported rotation: axis={axis}, angle={angle_deg}")


def _frame(face: Face) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    spec = FACE_SPECS[face]
    return (
        np.array(spec["normal"], dtype=np.int8),
        np.array(spec["right"], dtype=np.int8),
        np.array(spec["up"], dtype=np.int8),
    )


def _build_sticker_model() -> tuple[list[dict[str, np.ndarray]], dict[tuple[int, int, int], Face]]:
    stickers: list[dict[str, np.ndarray]] = []
    normal_to_face: dict[tuple[int, int, int], Face] = {}

    for face in Face:
        n, r, up = _frame(face)
        normal_to_face[tuple(int(v) for v in n)] = face

        for row in range(FACE_SIZE):
            for col in range(FACE_SIZE):
                cubie = n + (col - 1) * r + (1 - row) * up
                stickers.append(
                    {
                        "idx": face * STICKERS_PER_FACE + row * FACE_SIZE + col,
                        "face": face,
                        "row": row,
                        "col": col,
                        "normal": n,
                        "cubie": cubie,
                    }
                )

    return stickers, normal_to_face


_STICKERS, _NORMAL_TO_FACE = _build_sticker_model()


def sticker_index(cubie: np.ndarray, normal: np.ndarray) -> int:
    """Flat index of the sticker with outward ``normal`` on the cubie at ``cubie``."""
    face = _NORMAL_TO_FACE[tuple(int(v) for v in normal)]
    n, r, up = _frame(face)
    offset = cubie - n
    col = int(np.dot(offset, r)) + 1
    row = 1 - int(np.dot(offset, up))
    if not (0 <= row < FACE_SIZE and 0 <= col < FACE_SIZE):
        raise ValueError(f"Invalid cubie {cubie} for face {face.name}")
    return face * STICKERS_PER_FACE + row * FACE_SIZE + col


def layer_turn_permutation(axis: str, layers: tuple[int, ...], angle_deg: int) -> np.ndarray:
    """Permutation ``p`` (``new = old[p]``) for turning ``layers`` about ``axis``."""
    rot = rotation_matrix(axis, angle_deg)
    axis_idx = AXIS_INDEX[axis]
    perm = np.empty(STATE_SIZE, dtype=np.int32)

    for sticker in _STICKERS:
        cubie = sticker["cubie"]
        normal = sticker["normal"]
        if int(cubie[axis_idx]) in layers:
            cubie = rot @ cubie
            normal = rot @ normal
        perm[sticker_index(cubie, normal)] = sticker["idx"]

    return perm


def reference_permutation(move: Move) -> np.ndarray:
    if move is Move.NONE:
        return np.arange(STATE_SIZE, dtype=np.int32)

    axis, layers, angle = LAYER_TURNS[move.base]
    if move.is_prime:
        angle = -angle
    perm = layer_turn_permutation(axis, layers, angle)
    if move.is_double:
        perm = perm[perm]
    return perm


REFERENCE_MOVE_PERMUTATIONS = {move: reference_permutation(move) for move in ALL_MOVES}

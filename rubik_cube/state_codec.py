"""State validation and codec helpers."""

from __future__ import annotations

import numpy as np

from .actions import N_FACES, STATE_SIZE, STICKERS_PER_FACE, Face

# Yellow on top, white on bottom, blue in front, green in back,
# orange on the left and red on the right.
SOLVED_COLORS = {
    Face.TOP: "y",
    Face.BOTTOM: "w",
    Face.FRONT: "b",
    Face.BACK: "g",
    Face.LEFT: "o",
    Face.RIGHT: "r",
}

COLOR_DTYPE = "<U1"


class StateValidationError(ValueError):
    """Raised when an input state is invalid."""


def solved_state() -> np.ndarray:
    """Return the canonical solved ``(6, 9)`` grid."""
    colors = np.array([SOLVED_COLORS[face] for face in Face], dtype=COLOR_DTYPE)
    return np.repeat(colors[:, None], STICKERS_PER_FACE, axis=1)


def _validate_colors(arr: np.ndarray) -> np.ndarray:
    values, counts = np.unique(arr, return_counts=True)
    allowed = set(SOLVED_COLORS.values())

    unknown = sorted(set(values.tolist()) - allowed)
    if unknown:
        raise StateValidationError(f"State contains invalid colors {unknown}; allowed are {sorted(allowed)}")

    if len(values) != N_FACES or np.any(counts != STICKERS_PER_FACE):
        raise StateValidationError(
            f"Invalid sticker counts; each of the {N_FACES} colors must appear exactly {STICKERS_PER_FACE} times"
        )

    return arr.reshape(N_FACES, STICKERS_PER_FACE).astype(COLOR_DTYPE, copy=True)


def validate_state(state: str | list | np.ndarray) -> np.ndarray:
    """Validate state and return a ``(6, 9)`` color grid.

    Accepts a ``(6, 9)`` array, a flat sequence of 54 colors, or a string of
    54 color characters (whitespace ignored).
    """
    if isinstance(state, str):
        state = list("".join(state.split()))

    arr = np.asarray(state)
    if arr.size != STATE_SIZE or arr.ndim not in (1, 2):
        raise StateValidationError(
            f"State must be {STATE_SIZE} stickers flat or shaped ({N_FACES}, {STICKERS_PER_FACE}), got shape {arr.shape}"
        )
    if arr.ndim == 2 and arr.shape != (N_FACES, STICKERS_PER_FACE):
        raise StateValidationError(
            f"Faces array must have shape ({N_FACES}, {STICKERS_PER_FACE}), got {arr.shape}"
        )

    return _validate_colors(arr.astype(str).reshape(-1))


def state_to_string(state: np.ndarray) -> str:
    return "".join(validate_state(state).reshape(-1).tolist())


def flat_to_faces(state: str | list | np.ndarray) -> np.ndarray:
    return validate_state(state)


def faces_to_flat(faces: np.ndarray) -> np.ndarray:
    arr = np.asarray(faces)
    if arr.shape != (N_FACES, STICKERS_PER_FACE):
        raise StateValidationError(
            f"Faces array must have shape ({N_FACES}, {STICKERS_PER_FACE}), got {arr.shape}"
        )
    return validate_state(arr).reshape(-1)

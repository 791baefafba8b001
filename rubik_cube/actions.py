"""Faces, axes and the move table for the 3x3 Rubik cube."""

from __future__ import annotations

import enum
from typing import Iterable, NamedTuple


class InvalidMoveError(ValueError):
    """Raised when a move token is not part of the move set."""


class Face(enum.IntEnum):
    TOP = 0
    BOTTOM = 1
    FRONT = 2
    BACK = 3
    LEFT = 4
    RIGHT = 5


class Axis(enum.IntEnum):
    Y = 0  # vertical: FRONT, RIGHT, BACK, LEFT
    X = 1  # left-right: TOP, FRONT, BOTTOM, BACK
    Z = 2  # front-back: TOP, RIGHT, BOTTOM, LEFT


N_FACES = len(Face)
STICKERS_PER_FACE = 9
FACE_SIZE = 3
STATE_SIZE = N_FACES * STICKERS_PER_FACE

FACE_NAMES = {
    Face.TOP: "Top",
    Face.BOTTOM: "Bottom",
    Face.FRONT: "Front",
    Face.BACK: "Back",
    Face.LEFT: "Left",
    Face.RIGHT: "Right",
}


class Move(enum.Enum):
    """Every turn the cube understands, keyed by standard notation."""

    U = "U"
    D = "D"
    R = "R"
    L = "L"
    F = "F"
    B = "B"
    U_PRIME = "U'"
    D_PRIME = "D'"
    R_PRIME = "R'"
    L_PRIME = "L'"
    F_PRIME = "F'"
    B_PRIME = "B'"
    U2 = "U2"
    D2 = "D2"
    R2 = "R2"
    L2 = "L2"
    F2 = "F2"
    B2 = "B2"

    UW = "Uw"
    DW = "Dw"
    RW = "Rw"
    LW = "Lw"
    FW = "Fw"
    BW = "Bw"
    UW_PRIME = "Uw'"
    DW_PRIME = "Dw'"
    RW_PRIME = "Rw'"
    LW_PRIME = "Lw'"
    FW_PRIME = "Fw'"
    BW_PRIME = "Bw'"
    UW2 = "Uw2"
    DW2 = "Dw2"
    RW2 = "Rw2"
    LW2 = "Lw2"
    FW2 = "Fw2"
    BW2 = "Bw2"

    M = "M"
    E = "E"
    S = "S"
    M_PRIME = "M'"
    E_PRIME = "E'"
    S_PRIME = "S'"
    M2 = "M2"
    E2 = "E2"
    S2 = "S2"

    NONE = ""

    @property
    def notation(self) -> str:
        return self.value

    @property
    def base(self) -> str:
        """Notation without the prime or double suffix ("Rw" for "Rw2")."""
        return self.value.rstrip("'2")

    @property
    def is_prime(self) -> bool:
        return self.value.endswith("'")

    @property
    def is_double(self) -> bool:
        return self.value.endswith("2")

    def inverse(self) -> Move:
        return _INVERSE_MOVES[self]

    def __str__(self) -> str:
        return self.value


ALL_MOVES = tuple(m for m in Move if m is not Move.NONE)

_INVERSE_MOVES: dict[Move, Move] = {Move.NONE: Move.NONE}
for _move in ALL_MOVES:
    if _move.is_double:
        _INVERSE_MOVES[_move] = _move
    elif _move.is_prime:
        _INVERSE_MOVES[_move] = Move(_move.base)
    else:
        _INVERSE_MOVES[_move] = Move(_move.value + "'")
del _move

# Moves used for scrambling: outer quarter/half turns and slices, no wide turns.
STANDARD_MOVES = (
    Move.U, Move.D, Move.R, Move.L, Move.F, Move.B,
    Move.U_PRIME, Move.D_PRIME, Move.R_PRIME, Move.L_PRIME, Move.F_PRIME, Move.B_PRIME,
    Move.U2, Move.D2, Move.R2, Move.L2, Move.F2, Move.B2,
    Move.M, Move.E, Move.S,
    Move.M_PRIME, Move.E_PRIME, Move.S_PRIME,
    Move.M2, Move.E2, Move.S2,
)


class BandKind(enum.Enum):
    ROW = "row"  # horizontal layers, Y axis
    COLUMN = "column"  # left-right layers, X axis
    SLICE = "slice"  # front-back layers, Z axis


class FaceTurn(NamedTuple):
    face: Face
    reverse: bool = False


class BandTurn(NamedTuple):
    kind: BandKind
    layer: int
    reverse: bool = False


Primitive = FaceTurn | BandTurn

# Clockwise quarter turn of every base move.
# M follows L, E follows D, S follows F.
_QUARTER_TURNS: dict[str, tuple[Primitive, ...]] = {
    "U": (FaceTurn(Face.TOP), BandTurn(BandKind.ROW, 0)),
    "D": (FaceTurn(Face.BOTTOM), BandTurn(BandKind.ROW, 2, True)),
    "R": (FaceTurn(Face.RIGHT), BandTurn(BandKind.COLUMN, 2, True)),
    "L": (FaceTurn(Face.LEFT), BandTurn(BandKind.COLUMN, 0)),
    "F": (FaceTurn(Face.FRONT), BandTurn(BandKind.SLICE, 2)),
    "B": (FaceTurn(Face.BACK), BandTurn(BandKind.SLICE, 0, True)),
    "Uw": (FaceTurn(Face.TOP), BandTurn(BandKind.ROW, 0), BandTurn(BandKind.ROW, 1)),
    "Dw": (FaceTurn(Face.BOTTOM), BandTurn(BandKind.ROW, 2, True), BandTurn(BandKind.ROW, 1, True)),
    "Rw": (FaceTurn(Face.RIGHT), BandTurn(BandKind.COLUMN, 2, True), BandTurn(BandKind.COLUMN, 1, True)),
    "Lw": (FaceTurn(Face.LEFT), BandTurn(BandKind.COLUMN, 0), BandTurn(BandKind.COLUMN, 1)),
    "Fw": (FaceTurn(Face.FRONT), BandTurn(BandKind.SLICE, 2), BandTurn(BandKind.SLICE, 1)),
    "Bw": (FaceTurn(Face.BACK), BandTurn(BandKind.SLICE, 0, True), BandTurn(BandKind.SLICE, 1, True)),
    "M": (BandTurn(BandKind.COLUMN, 1),),
    "E": (BandTurn(BandKind.ROW, 1, True),),
    "S": (BandTurn(BandKind.SLICE, 1),),
}


def _flipped(primitive: Primitive) -> Primitive:
    return primitive._replace(reverse=not primitive.reverse)


def _build_move_sequences() -> dict[Move, tuple[Primitive, ...]]:
    sequences: dict[Move, tuple[Primitive, ...]] = {Move.NONE: ()}
    for move in ALL_MOVES:
        quarter = _QUARTER_TURNS[move.base]
        if move.is_double:
            sequences[move] = quarter + quarter
        elif move.is_prime:
            sequences[move] = tuple(_flipped(p) for p in quarter)
        else:
            sequences[move] = quarter
    return sequences


MOVE_SEQUENCES = _build_move_sequences()


def quarter_move_sequence(move: Move) -> tuple[Primitive, ...]:
    """Return the ordered primitive quarter turns that realize ``move``."""
    return MOVE_SEQUENCES[move]


def to_move(move: Move | str) -> Move:
    if isinstance(move, Move):
        return move
    if isinstance(move, str):
        token = move.strip().replace("’", "'")
        try:
            return Move(token)
        except ValueError:
            pass
    raise InvalidMoveError(f"Unknown move: {move!r}")


def parse_moves(text: str) -> list[Move]:
    """Parse whitespace separated notation such as ``"R U R' U'"``."""
    return [to_move(token) for token in text.split()]


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(m.value for m in moves if m is not Move.NONE)

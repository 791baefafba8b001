"""CLI entrypoint for the Rubik cube engine."""

from __future__ import annotations

import argparse
import logging

from .actions import ALL_MOVES, InvalidMoveError, format_moves
from .engine import DEFAULT_SCRAMBLE_STEPS, RubiksCube
from .render import format_cube, format_net
from .state_codec import StateValidationError


def _print_cube(cube: RubiksCube, net: bool) -> None:
    grid = cube.get_state()
    print(format_net(grid) if net else format_cube(grid))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rubik 3x3 cube engine")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--net", action="store_true", help="Print the cube as an unfolded net")

    scramble = sub.add_parser("scramble", parents=[common], help="Scramble a solved cube")
    scramble.add_argument("--steps", type=int, default=DEFAULT_SCRAMBLE_STEPS)
    scramble.add_argument("--seed", type=int, default=None)

    apply = sub.add_parser("apply", parents=[common], help="Apply moves in standard notation")
    apply.add_argument("moves", type=str, help="Moves such as \"R U R' U'\"")
    apply.add_argument("--state", type=str, default=None, help="Start from 54 color characters")

    sub.add_parser("moves", help="List every move with its inverse")

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.mode == "scramble":
            cube = RubiksCube(seed=args.seed)
            moves = cube.scramble(args.steps)
            print(f"Scramble: {format_moves(moves)}")
            _print_cube(cube, args.net)
            return

        if args.mode == "apply":
            cube = RubiksCube(initial_state=args.state)
            cube.apply_moves(args.moves)
            _print_cube(cube, args.net)
            print(f"Solved: {cube.is_solved()}")
            return

        if args.mode == "moves":
            for move in ALL_MOVES:
                print(f"{move.value:<4} {move.inverse().value}")
            return
    except (StateValidationError, InvalidMoveError) as exc:
        parser.error(str(exc))

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()

import unittest

import numpy as np

from rubik_cube.actions import ALL_MOVES, STANDARD_MOVES, InvalidMoveError, Face, Move
from rubik_cube.engine import Phase, RubiksCube
from rubik_cube.rotations import MOVE_PERMUTATIONS
from rubik_cube.state_codec import solved_state


def _state_after(moves, start=None):
    cube = RubiksCube(initial_state=start)
    cube.apply_moves(moves)
    return cube.get_state()


class TestEngineMoves(unittest.TestCase):
    def test_inverse_moves_restore_state(self):
        scrambled = RubiksCube(seed=5)
        scrambled.scramble(40)
        for start in (solved_state(), scrambled.get_state()):
            for move in ALL_MOVES:
                cube = RubiksCube(initial_state=start)
                cube.apply_move(move)
                cube.apply_move(move.inverse())
                self.assertTrue(np.array_equal(start, cube.get_state()), msg=f"Failed for {move}")

    def test_four_quarter_turns_restore_state(self):
        quarter_moves = [m for m in ALL_MOVES if not m.is_double]
        for move in quarter_moves:
            cube = RubiksCube()
            initial = cube.get_state()
            for _ in range(4):
                cube.apply_move(move)
            self.assertTrue(np.array_equal(initial, cube.get_state()), msg=f"Failed for {move}")

    def test_half_turn_equals_two_quarter_turns(self):
        start = RubiksCube(seed=11)
        start.scramble(20)
        for move in (m for m in ALL_MOVES if m.is_double):
            quarter = Move(move.base)
            double = _state_after(move.value, start.get_state())
            twice = _state_after(f"{quarter.value} {quarter.value}", start.get_state())
            self.assertTrue(np.array_equal(double, twice), msg=f"Failed for {move}")

    def test_moves_only_permute_stickers(self):
        cube = RubiksCube(seed=2024)
        cube.scramble(100)
        cube.apply_moves("Uw Rw' Fw2 Dw Lw2 Bw'")
        values, counts = np.unique(cube.get_state(), return_counts=True)
        self.assertEqual(sorted(values.tolist()), sorted(solved_state()[:, 0].tolist()))
        self.assertTrue(np.all(counts == 9))

    def test_disjoint_layers_commute(self):
        self.assertTrue(np.array_equal(_state_after("R L"), _state_after("L R")))
        self.assertTrue(np.array_equal(_state_after("U D'"), _state_after("D' U")))
        self.assertTrue(np.array_equal(_state_after("R R'"), solved_state()))

    def test_sexy_move_has_order_six(self):
        cube = RubiksCube()
        for i in range(6):
            cube.apply_moves("R U R' U'")
            if i < 5:
                self.assertFalse(cube.is_solved())
        self.assertTrue(cube.is_solved())
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))

    def test_u_turn_hands_top_rows_around(self):
        cube = RubiksCube()
        cube.apply_move(Move.U)
        state = cube.get_state()

        self.assertEqual(state[Face.TOP].tolist(), ["y"] * 9)
        self.assertEqual(state[Face.BOTTOM].tolist(), ["w"] * 9)
        self.assertEqual(state[Face.FRONT].tolist(), ["r"] * 3 + ["b"] * 6)
        self.assertEqual(state[Face.RIGHT].tolist(), ["g"] * 3 + ["r"] * 6)
        self.assertEqual(state[Face.BACK].tolist(), ["o"] * 3 + ["g"] * 6)
        self.assertEqual(state[Face.LEFT].tolist(), ["b"] * 3 + ["o"] * 6)

    def test_r_turn_lifts_front_column_to_top(self):
        state = _state_after("R")
        self.assertEqual(state[Face.TOP, [2, 5, 8]].tolist(), ["b"] * 3)
        self.assertEqual(state[Face.BACK, [0, 3, 6]].tolist(), ["y"] * 3)
        self.assertEqual(state[Face.BOTTOM, [2, 5, 8]].tolist(), ["g"] * 3)
        self.assertEqual(state[Face.FRONT, [2, 5, 8]].tolist(), ["w"] * 3)
        self.assertEqual(state[Face.RIGHT].tolist(), ["r"] * 9)

    def test_f_turn_moves_top_edge_to_right(self):
        state = _state_after("F")
        self.assertEqual(state[Face.RIGHT, [0, 3, 6]].tolist(), ["y"] * 3)
        self.assertEqual(state[Face.BOTTOM, [0, 1, 2]].tolist(), ["r"] * 3)
        self.assertEqual(state[Face.LEFT, [2, 5, 8]].tolist(), ["w"] * 3)
        self.assertEqual(state[Face.TOP, [6, 7, 8]].tolist(), ["o"] * 3)

    def test_turn_moves_face_and_adjacent_strips(self):
        """Regression: face turns must move side strips too (not face-only rotation)."""
        base = np.arange(54)
        for move in ALL_MOVES:
            if move.is_double:
                continue
            changed = int((base[MOVE_PERMUTATIONS[move]] != base).sum())
            if move.base in ("M", "E", "S"):
                expected = 12
            elif move.base.endswith("w"):
                expected = 32
            else:
                expected = 20
            self.assertEqual(changed, expected, msg=f"{move}: expected {expected} moved stickers")

    def test_half_turn_records_single_history_entry(self):
        cube = RubiksCube()
        cube.apply_move(Move.R2)
        self.assertEqual(cube.history(Phase.SOLVE), [Move.R2])
        self.assertEqual(cube.undo_last(), Move.R2)
        self.assertEqual(cube.history(Phase.SOLVE), [])
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))

    def test_no_move_is_noop_and_not_recorded(self):
        cube = RubiksCube()
        cube.apply_move(Move.NONE)
        self.assertEqual(cube.history(Phase.SOLVE), [])
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))

    def test_invalid_move_leaves_cube_untouched(self):
        cube = RubiksCube()
        cube.apply_move("R")
        before = cube.get_state()
        with self.assertRaises(InvalidMoveError):
            cube.apply_move("Q")
        self.assertTrue(np.array_equal(before, cube.get_state()))
        self.assertEqual(cube.history(Phase.SOLVE), [Move.R])

    def test_undo_on_empty_history_is_noop(self):
        cube = RubiksCube()
        self.assertIsNone(cube.undo_last())
        self.assertIsNone(cube.undo_last(Phase.SCRAMBLE))
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))

    def test_undo_uses_selected_history(self):
        cube = RubiksCube(seed=8)
        cube.scramble(10)
        scrambled = cube.get_state()
        cube.apply_moves("F Rw' S")
        self.assertEqual(cube.undo_last(), Move.S)
        self.assertEqual(cube.undo_last(), Move.RW_PRIME)
        self.assertEqual(cube.undo_last(), Move.F)
        self.assertIsNone(cube.undo_last())
        self.assertTrue(np.array_equal(cube.get_state(), scrambled))

        while cube.undo_last(Phase.SCRAMBLE) is not None:
            pass
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))

    def test_scramble_is_deterministic_for_fixed_seed(self):
        c1 = RubiksCube()
        c2 = RubiksCube()

        m1 = c1.scramble(30, seed=123)
        m2 = c2.scramble(30, seed=123)

        self.assertEqual(m1, m2)
        self.assertEqual(c1.history(Phase.SCRAMBLE), m1)
        self.assertTrue(np.array_equal(c1.get_state(), c2.get_state()))

    def test_scramble_uses_standard_moves_only(self):
        cube = RubiksCube(seed=99)
        moves = cube.scramble(300)
        self.assertEqual(len(moves), 300)
        self.assertTrue(set(moves) <= set(STANDARD_MOVES))
        self.assertFalse(any(m.base.endswith("w") for m in moves))
        self.assertEqual(cube.history(Phase.SOLVE), [])

    def test_scramble_defaults_to_thirty_moves(self):
        cube = RubiksCube(seed=1)
        self.assertEqual(len(cube.scramble()), 30)

    def test_scramble_rejects_negative_steps(self):
        cube = RubiksCube()
        with self.assertRaises(ValueError):
            cube.scramble(-1)

    def test_reset_restores_solved_and_clears_histories(self):
        cube = RubiksCube(seed=4)
        cube.scramble(15)
        cube.apply_moves("R U")
        cube.reset()
        self.assertTrue(np.array_equal(cube.get_state(), solved_state()))
        self.assertEqual(cube.history(Phase.SCRAMBLE), [])
        self.assertEqual(cube.history(Phase.SOLVE), [])


if __name__ == "__main__":
    unittest.main()

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from rubik_cube.cli import build_parser, main


def run_cli(*argv: str) -> str:
    out = io.StringIO()
    with redirect_stdout(out):
        main(list(argv))
    return out.getvalue()


class TestCLI(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["scramble"])
        self.assertEqual(args.steps, 30)
        self.assertIsNone(args.seed)
        self.assertFalse(args.net)

    def test_scramble_prints_moves_and_cube(self):
        out = run_cli("scramble", "--steps", "5", "--seed", "3")
        first = out.splitlines()[0]
        self.assertTrue(first.startswith("Scramble: "))
        self.assertEqual(len(first.split()) - 1, 5)
        self.assertIn("Front face:", out)

    def test_scramble_is_reproducible(self):
        self.assertEqual(
            run_cli("scramble", "--steps", "12", "--seed", "9", "--net"),
            run_cli("scramble", "--steps", "12", "--seed", "9", "--net"),
        )

    def test_apply_reports_solved(self):
        out = run_cli("apply", "R U R' U' " * 6)
        self.assertTrue(out.rstrip().endswith("Solved: True"))
        out = run_cli("apply", "F2 M", "--net")
        self.assertTrue(out.rstrip().endswith("Solved: False"))

    def test_moves_lists_inverses(self):
        lines = run_cli("moves").splitlines()
        self.assertEqual(len(lines), 42)
        self.assertEqual(lines[0].split(), ["U", "U'"])

    def test_bad_input_exits_with_usage_error(self):
        for argv in (["apply", "R Q"], ["apply", "R", "--state", "abc"], ["scramble", "--steps", "-2"]):
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                run_cli(*argv)
            self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()

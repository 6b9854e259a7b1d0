import io
import unittest

from puzparse import parse_puz
from puzparse.utils.pretty import format_grid, format_numbers, print_puzzle_stats

from puz_samples import build_puz


class PrettyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = parse_puz(
            build_puz(3, 3, "ABCD.EFGH", ["a1", "d1", "d2", "a3"], title="Ring", notes="n")
        )

    def test_format_grid_marks_black_cells(self) -> None:
        lines = format_grid(self.puzzle).splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[3], " 1 |  D  #  E")

    def test_format_numbers(self) -> None:
        self.assertEqual(
            format_numbers(self.puzzle).splitlines(),
            ["  1   .   2", "  .   .   .", "  3   .   ."],
        )

    def test_stats_include_clues_and_notes(self) -> None:
        stream = io.StringIO()
        print_puzzle_stats(self.puzzle, stream=stream)
        text = stream.getvalue()
        self.assertIn("Black cells:   1", text)
        self.assertIn("3. a3", text)
        self.assertIn("--- Notes ---", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

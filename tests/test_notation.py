from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from core.move import Move  # noqa: E402
from core.notation import format_move, parse_move  # noqa: E402


class NotationTests(unittest.TestCase):
    def test_parse_maps_labels_to_indices(self) -> None:
        self.assertEqual(parse_move("3a-4b"), Move(5, 0, 4, 1))
        self.assertEqual(parse_move("8h-1a"), Move(0, 7, 7, 0))

    def test_parse_tolerates_case_and_spaces(self) -> None:
        self.assertEqual(parse_move("  6B - 5a \n"), Move(2, 1, 3, 0))

    def test_parse_rejects_malformed_input(self) -> None:
        for text in ("", "3a4b", "9a-4b", "0a-1b", "3i-4b", "a3-b4", "33-44", "3a-4b-5c", "3a-"):
            with self.subTest(text=text):
                self.assertIsNone(parse_move(text))

    def test_format_is_inverse_of_parse(self) -> None:
        move = Move(2, 1, 3, 0)
        self.assertEqual(format_move(move), "6b-5a")
        self.assertEqual(parse_move(format_move(move)), move)


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import contextlib
import io
import os
import unittest
from unittest.mock import patch

from plandash.blocks import parse_block


class TestBlockParserContract(unittest.TestCase):
    def test_scalars_and_comments(self) -> None:
        text = "# heading\nname: demo\n\ncount: 4\nflag: true\nempty: ~\n"
        self.assertEqual(parse_block(text), {"name": "demo", "count": 4, "flag": True, "empty": None})

    def test_empty_value_and_brackets_force_a_list(self) -> None:
        self.assertEqual(parse_block("tags:\nother: []"), {"tags": [], "other": []})

    def test_simple_list(self) -> None:
        text = "tags:\n  - red\n  - 2\n  - 'x y'\n"
        self.assertEqual(parse_block(text), {"tags": ["red", 2, "x y"]})

    def test_colon_in_item_always_starts_an_object(self) -> None:
        self.assertEqual(parse_block("tags:\n  - 'x: y'\n"), {"tags": [{}]})
        self.assertEqual(parse_block("urls:\n  - http://example.com\n"), {"urls": [{"http": "//example.com"}]})

    def test_list_of_objects(self) -> None:
        text = (
            "tasks:\n"
            "  - title: A\n"
            "    status: done\n"
            "\n"
            "    # inner comment\n"
            "    due: 2025-01-10\n"
            "  - title: B\n"
            "    status: blocked\n"
            "after: 1\n"
        )
        self.assertEqual(
            parse_block(text),
            {
                "tasks": [
                    {"title": "A", "status": "done", "due": "2025-01-10"},
                    {"title": "B", "status": "blocked"},
                ],
                "after": 1,
            },
        )

    def test_object_item_without_leading_pair(self) -> None:
        text = "links:\n  - 'home: page'\n    label: home\n"
        self.assertEqual(parse_block(text), {"links": [{"label": "home"}]})

    def test_list_item_without_key_is_ignored(self) -> None:
        self.assertEqual(parse_block("- orphan\nname: x"), {"name": "x"})

    def test_scalar_value_is_coerced_to_list(self) -> None:
        self.assertEqual(parse_block("tags: red\n  - blue"), {"tags": ["red", "blue"]})
        self.assertEqual(parse_block("tags: null\n  - blue"), {"tags": ["blue"]})

    def test_nested_list_under_object_key_is_flattened_into_outer_list(self) -> None:
        text = (
            "milestones:\n"
            "  - title: M\n"
            "    tasks:\n"
            "      - A\n"
        )
        self.assertEqual(parse_block(text), {"milestones": [{"title": "M", "tasks": None}, "A"]})

    def test_garbage_lines_are_skipped(self) -> None:
        self.assertEqual(parse_block("not a pair\n-nospace\nok: 1\n!!: 2"), {"ok": 1})

    def test_non_ascii_keys_are_not_recognized(self) -> None:
        self.assertEqual(parse_block("名稱: x\nname: y"), {"name": "y"})


class TestBlockParserDiagnosticsContract(unittest.TestCase):
    def _stderr_of(self, text: str, env: dict) -> str:
        err = io.StringIO()
        with patch.dict(os.environ, env), contextlib.redirect_stderr(err):
            parse_block(text)
        return err.getvalue()

    def test_skipped_line_is_reported_when_enabled(self) -> None:
        err = self._stderr_of("name: demo\nnot a pair\n", {"PLANDASH_OBS_LOG": "1"})
        self.assertIn("[plandash.blocks] WARN: ignored line 2: 'not a pair'", err)

    def test_diagnostics_are_silent_by_default(self) -> None:
        err = self._stderr_of("name: demo\nnot a pair\n", {"PLANDASH_OBS_LOG": "0"})
        self.assertEqual(err, "")


if __name__ == "__main__":
    unittest.main(verbosity=2)

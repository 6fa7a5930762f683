"""
Tests for CLI entry points.

These tests focus on:
- argument validation (unknown filter, bad --now)
- the query command printing the backend parameters
- the list command reading a temporary sessions file
"""

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from sessionfilter.cli import main


class TestCLI(unittest.TestCase):
    def _run(self, argv: list) -> tuple:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(argv)
        return ctx.exception.code, out.getvalue()

    def test_unknown_filter_for_role_fails(self) -> None:
        code, out = self._run(["query", "--role", "teacher", "--filter", "month"])
        self.assertEqual(code, 1)
        self.assertIn("Unknown filter", out)

    def test_invalid_now_fails(self) -> None:
        code, out = self._run(["ranges", "--now", "yesterday-ish"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid --now", out)

    def test_query_prints_params(self) -> None:
        code, out = self._run(
            ["query", "--role", "student", "--filter", "month", "--search", " algebra ", "--now", "2024-02-15T10:00"]
        )
        self.assertEqual(code, 0)
        params = json.loads(out)
        self.assertEqual(params["pageNumber"], 1)
        self.assertEqual(
            params["filters"],
            {"search": "algebra", "dateStart": "2024-02-01T00:00:00", "dateEnd": "2024-02-29T23:59:59"},
        )

    def test_query_notes_unpaged_mode_on_stderr(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            code, out = self._run(["query", "--role", "student", "--filter", "all"])
        self.assertEqual(code, 0)
        self.assertIn("unpaged", err.getvalue())
        self.assertNotIn("unpaged", out)

    def test_query_default_filter_has_no_filters(self) -> None:
        code, out = self._run(["query", "--role", "teacher"])
        self.assertEqual(code, 0)
        self.assertNotIn("filters", json.loads(out))

    def test_list_filters_file(self) -> None:
        records = [
            {"id": "1", "courseName": "Algebra", "dateStart": "2024-06-10T08:00:00", "dateEnd": "2024-06-10T10:00:00"},
            {"id": "2", "courseName": "Biology", "dateStart": "2024-06-11T08:00:00", "dateEnd": "2024-06-11T10:00:00"},
        ]
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sessions.json"
            p.write_text(json.dumps(records), encoding="utf-8")
            code, out = self._run(["list", str(p), "--role", "teacher", "--filter", "today", "--now", "2024-06-10T09:00"])

        self.assertEqual(code, 0)
        self.assertIn("Algebra", out)
        self.assertNotIn("Biology", out)
        self.assertIn("1 of 2 sessions", out)
        self.assertIn("10.06.2024", out)

    def test_list_empty_result(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sessions.json"
            p.write_text("[]", encoding="utf-8")
            code, out = self._run(["list", str(p), "--role", "student", "--filter", "past"])
        self.assertEqual(code, 0)
        self.assertIn("No sessions.", out)


if __name__ == "__main__":
    unittest.main()

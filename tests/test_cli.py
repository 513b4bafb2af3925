"""
End-to-end tests for the jsscan command line.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jsscan.cli import main


class TestCommandLine(unittest.TestCase):
    """Test the CLI exit codes, trace and report file."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name
        self.report_path = os.path.join(self.tmp, "stats.json")

    def tearDown(self):
        self._tmp.cleanup()

    def _write_source(self, text: str, name: str = "input.js") -> str:
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(argv)
        return status, out.getvalue(), err.getvalue()

    def _load_report(self):
        with open(self.report_path, encoding="utf-8") as f:
            return json.load(f)

    def test_missing_argument_prints_usage(self):
        status, out, _ = self._run([])
        self.assertEqual(status, 1)
        self.assertEqual(out, "Usage: jsscan <filename>\n")
        self.assertFalse(os.path.exists(self.report_path))

    def test_unreadable_file(self):
        missing = os.path.join(self.tmp, "missing.js")
        status, out, err = self._run([missing, "-o", self.report_path])
        self.assertEqual(status, 1)
        self.assertIn("Error opening file", err)
        self.assertEqual(out, "")
        self.assertFalse(os.path.exists(self.report_path))

    def test_successful_scan(self):
        path = self._write_source("let x = 5;\nconsole.log(y);\n")
        status, out, _ = self._run([path, "-o", self.report_path])

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "[KEYWORD] let",
            "[OPERATOR] =",
            "[NUMBER] 5",
            "[DELIMITER] ;",
            "[KEYWORD] console",
            "[OPERATOR] .",
            "[KEYWORD] log",
            "[DELIMITER] (",
            "[IDENTIFIER] y",
            "[WARNING] Undeclared variable used: y",
            "[DELIMITER] )",
            "[DELIMITER] ;",
            "[WARNING] Unused variable: x",
        ])
        self.assertEqual(self._load_report(), {
            "variables": [{"name": "x", "used": False}],
            "total_lines": 2,
            "warnings": [
                {"message": "Undeclared variable used: y"},
                {"message": "Unused variable: x", "location": {"line": 1, "column": 4}},
            ],
        })

    def test_empty_file(self):
        path = self._write_source("")
        status, out, _ = self._run([path, "-o", self.report_path])
        self.assertEqual(status, 0)
        self.assertEqual(out, "")
        self.assertEqual(self._load_report(), {"variables": [], "total_lines": 0, "warnings": []})

    def test_quiet_still_writes_report(self):
        path = self._write_source("let a;")
        status, out, _ = self._run([path, "-o", self.report_path, "-q"])
        self.assertEqual(status, 0)
        self.assertEqual(out, "")
        self.assertEqual(self._load_report()["variables"], [{"name": "a", "used": False}])

    def test_check_semicolons_flag(self):
        path = self._write_source("let a = 1\na;\n")
        status, _, _ = self._run([path, "-o", self.report_path, "-q", "--check-semicolons"])
        self.assertEqual(status, 0)
        self.assertEqual(self._load_report()["warnings"], [
            {"message": "Missing semicolon", "location": {"line": 1, "column": 9}},
        ])

    def test_max_token_length_flag(self):
        path = self._write_source("averylongname;")
        status, out, _ = self._run([path, "-o", self.report_path, "--max-token-length", "5"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines()[0], "[IDENTIFIER] avery")

    def test_invalid_max_token_length(self):
        path = self._write_source("x;")
        status, _, err = self._run([path, "-o", self.report_path, "--max-token-length", "0"])
        self.assertEqual(status, 1)
        self.assertIn("max_token_length", err)

    def test_unwritable_report(self):
        path = self._write_source("let a;")
        bad_path = os.path.join(self.tmp, "missing-dir", "stats.json")
        status, _, err = self._run([path, "-o", bad_path, "-q"])
        self.assertEqual(status, 1)
        self.assertIn("Error writing report", err)

    def test_invalid_utf8_in_comment(self):
        path = os.path.join(self.tmp, "latin1.js")
        with open(path, "wb") as f:
            f.write(b"// caf\xe9\nlet x = 1;\n")
        status, out, _ = self._run([path, "-o", self.report_path])

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines()[0], "[COMMENT] // caf\ufffd")
        report = self._load_report()
        self.assertEqual(report["variables"], [{"name": "x", "used": False}])
        self.assertEqual(report["total_lines"], 2)
        # x starts after the 8-byte comment line and "let "
        self.assertEqual(report["warnings"][0]["location"], {"line": 2, "column": 12})

    def test_invalid_utf8_outside_comment_is_unknown(self):
        path = os.path.join(self.tmp, "stray.js")
        with open(path, "wb") as f:
            f.write(b"a \xff;")
        status, out, _ = self._run([path, "-o", self.report_path])
        self.assertEqual(status, 0)
        self.assertIn("[UNKNOWN] \ufffd", out.splitlines())

    def test_extra_positional_argument(self):
        path = self._write_source("x;")
        status, out, err = self._run([path, "other.js", "-o", self.report_path])
        self.assertEqual(status, 1)
        self.assertIn("unrecognized arguments", err)
        self.assertFalse(os.path.exists(self.report_path))

    def test_non_integer_max_token_length(self):
        path = self._write_source("x;")
        status, _, err = self._run([path, "--max-token-length", "abc"])
        self.assertEqual(status, 1)
        self.assertIn("invalid int value", err)

    def test_report_is_overwritten(self):
        with open(self.report_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        path = self._write_source("x;")
        status, _, _ = self._run([path, "-o", self.report_path, "-q"])
        self.assertEqual(status, 0)
        self.assertEqual(self._load_report()["warnings"], [{"message": "Undeclared variable used: x"}])


if __name__ == '__main__':
    unittest.main()

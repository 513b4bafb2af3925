"""
Test suite for the scan pipeline, trace output and JSON report.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jsscan.config import ScanConfig
from jsscan.pipeline import scan_source, scan_file
from jsscan.report.reporter import Reporter, ReportWriteError
from jsscan.report.trace import TraceSink, NullSink
from jsscan.lexer.scanner import Scanner
from jsscan.state import ScanState


class TestTrace(unittest.TestCase):
    """Trace lines emitted during a scan."""

    def _trace(self, code: str, config: ScanConfig = None):
        out = io.StringIO()
        report = scan_source(code, config=config, sink=TraceSink(out))
        return out.getvalue().splitlines(), report

    def test_declaration_trace(self):
        lines, _ = self._trace("let x = 5;")
        self.assertEqual(lines, [
            "[KEYWORD] let",
            "[OPERATOR] =",
            "[NUMBER] 5",
            "[DELIMITER] ;",
            "[WARNING] Unused variable: x",
        ])

    def test_undeclared_warning_follows_identifier(self):
        lines, _ = self._trace("console.log(y);")
        self.assertEqual(lines, [
            "[KEYWORD] console",
            "[OPERATOR] .",
            "[KEYWORD] log",
            "[DELIMITER] (",
            "[IDENTIFIER] y",
            "[WARNING] Undeclared variable used: y",
            "[DELIMITER] )",
            "[DELIMITER] ;",
        ])

    def test_comment_string_and_unknown_lines(self):
        lines, _ = self._trace("/* a */ 'b' // c\n#")
        self.assertEqual(lines, [
            "[COMMENT] /* a */",
            "[STRING] 'b'",
            "[COMMENT] // c",
            "[UNKNOWN] #",
        ])

    def test_missing_semicolon_trace(self):
        lines, _ = self._trace("let x = 1\nx;", ScanConfig(check_semicolons=True))
        self.assertIn("[WARNING] Missing semicolon", lines)
        self.assertEqual(lines.index("[WARNING] Missing semicolon"), 3)

    def test_null_sink_discards(self):
        report = scan_source("let x;", sink=NullSink())
        self.assertEqual(report.unused_count, 1)

    def test_emit_trace_off_writes_nothing(self):
        out = io.StringIO()
        saved = sys.stdout
        sys.stdout = out
        try:
            scan_source("let x;", config=ScanConfig(emit_trace=False))
        finally:
            sys.stdout = saved
        self.assertEqual(out.getvalue(), "")

    def test_identical_input_gives_identical_output(self):
        code = "let a = 1;\nb = a + c;\nconst d = 'x';\n"
        first_lines, first = self._trace(code)
        second_lines, second = self._trace(code)
        self.assertEqual(first_lines, second_lines)
        self.assertEqual(first.to_json(), second.to_json())


class TestReport(unittest.TestCase):
    """Structured report contents."""

    def _report(self, code: str):
        return scan_source(code, sink=NullSink())

    def test_declaration_report(self):
        report = self._report("let x = 5;")
        self.assertEqual(report.to_dict(), {
            "variables": [{"name": "x", "used": False}],
            "total_lines": 0,
            "warnings": [
                {"message": "Unused variable: x", "location": {"line": 1, "column": 4}},
            ],
        })

    def test_empty_input_report(self):
        report = self._report("")
        self.assertEqual(report.to_dict(), {"variables": [], "total_lines": 0, "warnings": []})

    def test_scan_warnings_precede_unused_warnings(self):
        code = "// comment\nvar a;\nlet b = a;\nc;\n"
        report = self._report(code)
        self.assertEqual(report.to_dict(), {
            "variables": [{"name": "a", "used": True}, {"name": "b", "used": False}],
            "total_lines": 4,
            "warnings": [
                {"message": "Undeclared variable used: c"},
                {"message": "Unused variable: b", "location": {"line": 3, "column": 22}},
            ],
        })

    def test_unused_warning_count_matches_unused_declarations(self):
        code = "let a; let b; let c; var d = a; const e = d + q;\nlet a;"
        report = self._report(code)
        unused = [w for w in report.warnings if w.message.startswith("Unused variable: ")]
        self.assertEqual(len(unused), report.unused_count)
        self.assertEqual([w.message for w in unused], [
            "Unused variable: b",
            "Unused variable: c",
            "Unused variable: e",
        ])

    def test_json_is_well_formed(self):
        report = self._report("let a; let b; x; y;")
        parsed = json.loads(report.to_json())
        self.assertEqual(len(parsed["warnings"]), 4)
        self.assertNotIn("location", parsed["warnings"][0])
        self.assertIn("location", parsed["warnings"][3])

    def test_finalize_is_idempotent(self):
        state = ScanState()
        Scanner("let x;", state=state).tokenize()
        reporter = Reporter(state)
        self.assertEqual(len(reporter.finalize()), 1)
        self.assertEqual(reporter.finalize(), [])
        self.assertEqual(len(reporter.build().warnings), 1)

    def test_write_overwrites_existing_file(self):
        report = self._report("let x;")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "stats.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("stale")
            report.write(path)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(json.load(f), report.to_dict())

    def test_write_to_missing_directory_raises(self):
        report = self._report("")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "no", "such", "dir", "stats.json")
            with self.assertRaises(ReportWriteError) as ctx:
                report.write(path)
            self.assertEqual(ctx.exception.diagnostic.code, "E002")

    def test_scan_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "in.js")
            with open(path, "w", encoding="utf-8") as f:
                f.write("let x = 1;\nx++;\n")
            report = scan_file(path, sink=NullSink())
        self.assertEqual(report.variables, [{"name": "x", "used": True}])
        self.assertEqual(report.total_lines, 2)
        self.assertEqual(report.warnings, [])


if __name__ == '__main__':
    unittest.main()

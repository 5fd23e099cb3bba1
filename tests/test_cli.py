import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import lint_parity_cli
from tools.io import read_json


def _run_main(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = lint_parity_cli.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestParseUnsupported(unittest.TestCase):
    def test_comma_list(self) -> None:
        self.assertEqual(
            frozenset({"a/b", "c"}),
            lint_parity_cli.parse_unsupported(" a/b, c ,,"),
        )
        self.assertEqual(frozenset(), lint_parity_cli.parse_unsupported(None))

    def test_file_with_comments(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "unsupported.txt"
            p.write_text("# from @oxlint/migrate\nimport/no-unresolved\n\n  react/prop-types  \n", encoding="utf-8")
            self.assertEqual(
                frozenset({"import/no-unresolved", "react/prop-types"}),
                lint_parity_cli.parse_unsupported(str(p)),
            )


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        # Keep a developer's .env out of the tests.
        patcher = mock.patch.object(lint_parity_cli, "load_dotenv")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_rules_mode_prints_mapping(self) -> None:
        code, out, _ = _run_main(["--mode", "rules"])
        self.assertEqual(0, code)
        self.assertIn("namespaces:", out)
        self.assertIn("typescript: '@typescript-eslint/'", out)
        self.assertIn("- oxc", out)

    def test_reconcile_mode_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            repo = Path(td)
            eslint_json = repo / "eslint.json"
            eslint_json.write_text(
                json.dumps([{"filePath": "src/a.js", "messages": [{"ruleId": "no-var", "line": 1, "column": 1}]}]),
                encoding="utf-8",
            )
            oxlint_json = repo / "oxlint.json"
            oxlint_json.write_text(
                json.dumps(
                    {
                        "diagnostics": [
                            {
                                "code": "eslint(no-var)",
                                "filename": "src/a.js",
                                "labels": [{"span": {"line": 1, "column": 1}}],
                            }
                        ]
                    }
                ),
                encoding="utf-8",
            )
            json_out = repo / "report.json"

            code, out, _ = _run_main(
                [
                    "--mode", "reconcile",
                    "--repo-path", str(repo),
                    "--eslint-json", str(eslint_json),
                    "--oxlint-json", str(oxlint_json),
                    "--unsupported", "react/prop-types",
                    "--ported-count", "3",
                    "--json-out", str(json_out),
                ]
            )

            self.assertEqual(0, code)
            self.assertIn("Matched violations: 1", out)
            self.assertIn("Migration ported 3 rules (75.0% of 4 total)", out)
            self.assertIn("Full report written to", out)
            report = read_json(json_out)["report"]

        self.assertEqual(1, report["matched_count"])
        self.assertEqual(["react/prop-types"], report["unsupported_rules"])

    def test_unwritable_json_out_is_a_fatal_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            repo = Path(td)
            eslint_json = repo / "eslint.json"
            eslint_json.write_text("[]", encoding="utf-8")
            oxlint_json = repo / "oxlint.json"
            oxlint_json.write_text('{"diagnostics": []}', encoding="utf-8")

            code, _, err = _run_main(
                [
                    "--mode", "reconcile",
                    "--repo-path", str(repo),
                    "--eslint-json", str(eslint_json),
                    "--oxlint-json", str(oxlint_json),
                    # A regular file cannot be a parent directory.
                    "--json-out", str(eslint_json / "report.json"),
                ]
            )

        self.assertEqual(1, code)
        self.assertIn("[lint-parity] Fatal error:", err)

    def test_errors_are_reported_and_exit_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, _, err = _run_main(
                [
                    "--mode", "reconcile",
                    "--eslint-json", str(Path(td) / "missing.json"),
                    "--oxlint-json", str(Path(td) / "missing.json"),
                ]
            )
        self.assertEqual(1, code)
        self.assertIn("[lint-parity] Fatal error:", err)

    def test_compare_mode_requires_a_target(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                lint_parity_cli.main([])
        self.assertEqual(2, ctx.exception.code)


if __name__ == "__main__":
    unittest.main()

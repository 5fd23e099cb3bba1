import unittest

from lint_parity.domain.report import ComparisonReport
from lint_parity.domain.violation import Violation
from pipeline.model import ToolVersions
from pipeline.report.render_text import (
    format_percent,
    render_comparison_text,
    render_summary_line,
    render_versions_line,
)


def _report(**kw) -> ComparisonReport:
    base = dict(
        eslint_total=0,
        oxlint_total=0,
        only_in_eslint=(),
        only_in_oxlint=(),
        matched_count=0,
        unsupported_rules=(),
        ported_rules_count=0,
    )
    base.update(kw)
    return ComparisonReport(**base)


class TestRenderText(unittest.TestCase):
    def test_format_percent(self) -> None:
        self.assertEqual("N/A", format_percent(None))
        self.assertEqual("50.0", format_percent(0.5))
        self.assertEqual("66.7", format_percent(2 / 3))
        self.assertEqual("100.0", format_percent(1.0))

    def test_empty_report(self) -> None:
        text = render_comparison_text(_report(), repo_url="https://x/repo.git", versions=ToolVersions())

        self.assertTrue(text.startswith("=== Oxlint vs ESLint Comparison ===\n"))
        self.assertIn("Repository: https://x/repo.git", text)
        self.assertIn("--- Only in ESLint (0 violations) ---\n  (none)", text)
        self.assertIn("--- Only in Oxlint (0 violations) ---\n  (none)", text)
        self.assertIn("--- Unsupported Rules (skipped, 0 total) ---\n  (none)", text)
        self.assertIn("(N/A% of 0 total)", text)
        self.assertIn("ESLint reported no violations.", text)
        self.assertTrue(text.endswith("Versions: ESLint unknown, Oxlint unknown\n"))

    def test_lists_are_capped(self) -> None:
        only = tuple(Violation("a.ts", i, 1, "no-var") for i in range(1, 6))
        report = _report(
            eslint_total=5,
            only_in_eslint=only,
            unsupported_rules=("a/x", "b/y", "c/z"),
            ported_rules_count=1,
        )
        text = render_comparison_text(
            report,
            repo_url="r",
            versions=ToolVersions(),
            max_violations=2,
            max_unsupported=1,
        )

        self.assertIn("  a.ts:1:1  no-var\n  a.ts:2:1  no-var\n  ... and 3 more", text)
        self.assertNotIn("a.ts:3:1", text)
        self.assertIn("  a/x\n  ... and 2 more", text)

        full = render_comparison_text(report, repo_url="r", versions=ToolVersions(), max_violations=None)
        self.assertIn("a.ts:5:1  no-var", full)
        self.assertNotIn("... and 3 more", full)

    def test_summary_line(self) -> None:
        report = _report(
            eslint_total=4,
            matched_count=3,
            only_in_eslint=(Violation("a.ts", 1, 1, "eqeqeq"),),
            unsupported_rules=("x/y",),
            ported_rules_count=3,
        )
        self.assertEqual(
            "Summary: Migration ported 3 rules (75.0% of 4 total). "
            "Oxlint matched 75.0% of ESLint violations for supported rules.",
            render_summary_line(report),
        )

    def test_versions_line_includes_tsgolint_when_known(self) -> None:
        self.assertEqual(
            "Versions: ESLint 9.1.0, Oxlint 1.2.0, oxlint-tsgolint 0.3.0",
            render_versions_line(ToolVersions(eslint="9.1.0", oxlint="1.2.0", oxlint_tsgolint="0.3.0")),
        )
        self.assertEqual(
            "Versions: ESLint 9.1.0, Oxlint 1.2.0",
            render_versions_line(ToolVersions(eslint="9.1.0", oxlint="1.2.0")),
        )


if __name__ == "__main__":
    unittest.main()

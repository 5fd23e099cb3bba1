"""pipeline.report.render_text

Console rendering for a comparison run.

This module contains formatting logic only (no file I/O, no comparison).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from lint_parity.domain.report import ComparisonReport
from lint_parity.domain.violation import Violation

from pipeline.model import ToolVersions

DEFAULT_MAX_VIOLATIONS = 50
DEFAULT_MAX_UNSUPPORTED = 20


def format_percent(ratio: Optional[float]) -> str:
    """``0.5 -> "50.0"``; ``None`` (empty denominator) -> ``"N/A"``."""
    if ratio is None:
        return "N/A"
    return f"{ratio * 100:.1f}"


def _capped(items: Sequence[str], limit: Optional[int]) -> List[str]:
    if not items:
        return ["  (none)"]
    if limit is None or limit < 0 or len(items) <= limit:
        return [f"  {x}" for x in items]
    lines = [f"  {x}" for x in items[:limit]]
    lines.append(f"  ... and {len(items) - limit} more")
    return lines


def _violation_lines(violations: Sequence[Violation], limit: Optional[int]) -> List[str]:
    return _capped([v.describe() for v in violations], limit)


def render_summary_line(report: ComparisonReport) -> str:
    if report.eslint_total > 0:
        match = (
            f"Oxlint matched {format_percent(report.match_ratio)}% "
            "of ESLint violations for supported rules."
        )
    else:
        match = "ESLint reported no violations."
    return (
        f"Summary: Migration ported {report.ported_rules_count} rules "
        f"({format_percent(report.ported_ratio)}% of {report.total_rules} total). {match}"
    )


def render_versions_line(versions: ToolVersions) -> str:
    parts = [f"ESLint {versions.eslint}", f"Oxlint {versions.oxlint}"]
    if versions.oxlint_tsgolint:
        parts.append(f"oxlint-tsgolint {versions.oxlint_tsgolint}")
    return f"Versions: {', '.join(parts)}"


def render_comparison_text(
    report: ComparisonReport,
    *,
    repo_url: str,
    versions: ToolVersions,
    max_violations: Optional[int] = DEFAULT_MAX_VIOLATIONS,
    max_unsupported: Optional[int] = DEFAULT_MAX_UNSUPPORTED,
) -> str:
    """Render the human-readable comparison summary.

    ``max_violations`` / ``max_unsupported`` cap the itemized lists; ``None``
    shows everything.
    """
    lines: List[str] = []

    lines.append("=== Oxlint vs ESLint Comparison ===")
    lines.append(f"Repository: {repo_url}")
    lines.append("")
    lines.append(f"ESLint violations (supported rules only): {report.eslint_total}")
    lines.append(f"Oxlint violations: {report.oxlint_total}")
    lines.append(f"Matched violations: {report.matched_count}")

    lines.append("")
    lines.append(f"--- Only in ESLint ({len(report.only_in_eslint)} violations) ---")
    lines.extend(_violation_lines(report.only_in_eslint, max_violations))

    lines.append("")
    lines.append(f"--- Only in Oxlint ({len(report.only_in_oxlint)} violations) ---")
    lines.extend(_violation_lines(report.only_in_oxlint, max_violations))

    lines.append("")
    lines.append(f"--- Unsupported Rules (skipped, {len(report.unsupported_rules)} total) ---")
    lines.extend(_capped(list(report.unsupported_rules), max_unsupported))

    lines.append("")
    lines.append(render_summary_line(report))
    lines.append(render_versions_line(versions))

    return "\n".join(lines) + "\n"

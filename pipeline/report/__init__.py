"""pipeline.report

Report presenters. They consume a finished :class:`ComparisonReport` and
never compute anything about the comparison themselves.
"""

from __future__ import annotations

from .render_json import build_report_payload, write_report_json
from .render_text import format_percent, render_comparison_text

__all__ = [
    "build_report_payload",
    "format_percent",
    "render_comparison_text",
    "write_report_json",
]

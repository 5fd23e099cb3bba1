"""pipeline.report.render_json

JSON artifact for a comparison run (report + provenance).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from tools.io import write_json

from pipeline.model import ComparisonRun

SCHEMA_VERSION = "1.0"


def build_report_payload(run: ComparisonRun) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": run.generated_at,
        "repository": run.repo_label,
        "repo_dir": str(run.repo_dir) if run.repo_dir else None,
        "versions": run.versions.to_dict(),
        "outputs": {
            "eslint": str(run.eslint_output) if run.eslint_output else None,
            "oxlint": str(run.oxlint_output) if run.oxlint_output else None,
        },
        "unmapped_oxlint_codes": dict(sorted(run.unmapped_codes.items())),
        "report": run.report.to_dict(),
    }


def write_report_json(path: Path, run: ComparisonRun) -> Path:
    write_json(path, build_report_payload(run))
    return path

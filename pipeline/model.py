"""pipeline.model

Shared data structures for one comparison run.

These dataclasses contain no side effects so the CLI, the orchestrator and
the presenter can pass them around freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from lint_parity.domain.report import ComparisonReport


def now_iso() -> str:
    """Return current UTC time as ISO-8601 string."""

    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ComparisonRequest:
    """Parameters for comparing ESLint and Oxlint on one repo."""

    repo_url: Optional[str] = None
    repo_path: Optional[Path] = None
    branch: Optional[str] = None

    # Lint with type information (oxlint-tsgolint).
    type_aware: bool = False

    workdir: Optional[Path] = None
    install: bool = True

    # YAML overlay on top of the built-in rule mapping.
    rule_map_path: Optional[Path] = None


@dataclass(frozen=True)
class ToolVersions:
    eslint: str = "unknown"
    oxlint: str = "unknown"
    oxlint_tsgolint: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        out: Dict[str, Optional[str]] = {"eslint": self.eslint, "oxlint": self.oxlint}
        if self.oxlint_tsgolint is not None:
            out["oxlint_tsgolint"] = self.oxlint_tsgolint
        return out


@dataclass(frozen=True)
class ComparisonRun:
    """Everything one run produced: the report plus provenance for rendering."""

    report: ComparisonReport
    repo_label: str
    versions: ToolVersions = field(default_factory=ToolVersions)
    repo_dir: Optional[Path] = None
    eslint_output: Optional[Path] = None
    oxlint_output: Optional[Path] = None
    # Oxlint code -> why it could not be mapped.
    unmapped_codes: Dict[str, str] = field(default_factory=dict)
    generated_at: str = field(default_factory=now_iso)

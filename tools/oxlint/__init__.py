"""tools/oxlint

Oxlint adapter: config migration + runner + normalizer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from lint_parity.rules.normalize import RuleNormalizer

from .migrate import (
    OXLINT_CONFIG_NAME,
    MigrationResult,
    count_ported_rules,
    migrate_to_oxlint,
    parse_migration_output,
)
from .normalize import OxlintParseResult, parse_oxlint_output, violations_from_oxlint_payload
from .runner import OXLINT_OUTPUT_NAME, run_oxlint


def execute(
    repo_dir: Path,
    *,
    type_aware: bool = False,
    normalizer: Optional[RuleNormalizer] = None,
) -> Tuple[Path, OxlintParseResult]:
    output_file = run_oxlint(repo_dir, type_aware=type_aware)
    return output_file, parse_oxlint_output(output_file, repo_dir, normalizer)


__all__ = [
    "MigrationResult",
    "OXLINT_CONFIG_NAME",
    "OXLINT_OUTPUT_NAME",
    "OxlintParseResult",
    "count_ported_rules",
    "execute",
    "migrate_to_oxlint",
    "parse_migration_output",
    "parse_oxlint_output",
    "run_oxlint",
    "violations_from_oxlint_payload",
]

"""tools/eslint

ESLint adapter: runner + normalizer.

``execute`` runs ESLint against a prepared repo and returns canonical
violations; the pieces are importable separately for offline parsing.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from lint_parity.domain.violation import Violation

from .normalize import parse_eslint_output, violations_from_eslint_results
from .runner import (
    ESLINT_OUTPUT_NAME,
    LegacyEslintConfigError,
    detect_eslint_config,
    run_eslint,
)


def execute(repo_dir: Path) -> Tuple[Path, List[Violation]]:
    output_file = run_eslint(repo_dir)
    return output_file, parse_eslint_output(output_file, repo_dir)


__all__ = [
    "ESLINT_OUTPUT_NAME",
    "LegacyEslintConfigError",
    "detect_eslint_config",
    "execute",
    "parse_eslint_output",
    "run_eslint",
    "violations_from_eslint_results",
]

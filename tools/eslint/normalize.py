"""tools/eslint/normalize.py

ESLint ``--format json`` output -> :class:`Violation` list.

ESLint already names rules canonically, so the only work here is path
normalization and dropping messages that have no rule (parse errors).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from lint_parity.domain.violation import Violation

from tools.core_normalize import finalize_violations, repo_relative_path
from tools.io import read_text_stripped


def violations_from_eslint_results(results: Any, repo_dir: Path) -> List[Violation]:
    """Convert a parsed ESLint results array into violations."""
    if not isinstance(results, list):
        raise ValueError("ESLint output is not an array")

    violations: List[Violation] = []
    for file_result in results:
        if not isinstance(file_result, dict):
            continue
        rel_path = repo_relative_path(repo_dir, file_result.get("filePath"))
        if not rel_path:
            continue

        for msg in file_result.get("messages") or []:
            if not isinstance(msg, dict):
                continue
            # Parse errors and other rule-less messages are not comparable.
            rule_id = msg.get("ruleId")
            if not rule_id:
                continue
            line = msg.get("line")
            column = msg.get("column")
            if not isinstance(line, int) or not isinstance(column, int):
                continue

            violations.append(
                Violation(file_path=rel_path, line=line, column=column, rule_id=str(rule_id))
            )

    return finalize_violations(violations)


def parse_eslint_output(output_file: Path, repo_dir: Path) -> List[Violation]:
    """Read and parse an ESLint JSON report file."""
    raw = read_text_stripped(output_file)
    if not raw:
        return []

    try:
        results = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse ESLint JSON output: {e}") from e

    return violations_from_eslint_results(results, repo_dir)

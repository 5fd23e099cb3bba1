"""tools/oxlint/normalize.py

Oxlint ``--format json`` output -> :class:`Violation` list.

Every diagnostic code goes through the rule normalizer. Codes that cannot be
mapped to an ESLint rule (Oxc-only checks, unknown plugins, odd shapes) are
dropped from the comparison and reported back as ``unmapped_codes``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from lint_parity.domain.violation import Violation
from lint_parity.rules.normalize import RuleNormalizer

from tools.core_normalize import finalize_violations, repo_relative_path
from tools.io import read_text_stripped

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OxlintParseResult:
    violations: Tuple[Violation, ...]
    # code -> normalizer outcome ("no_equivalent", "unknown_namespace", "malformed")
    unmapped_codes: Dict[str, str]


def _first_span(diagnostic: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    labels = diagnostic.get("labels")
    if not isinstance(labels, list) or not labels:
        return None
    first = labels[0]
    if not isinstance(first, dict):
        return None
    span = first.get("span")
    return span if isinstance(span, dict) else None


def violations_from_oxlint_payload(
    payload: Any,
    repo_dir: Path,
    normalizer: Optional[RuleNormalizer] = None,
) -> OxlintParseResult:
    """Convert a parsed Oxlint JSON payload into violations."""
    normalizer = normalizer or RuleNormalizer()

    diagnostics = payload.get("diagnostics") if isinstance(payload, dict) else None
    if not isinstance(diagnostics, list):
        return OxlintParseResult(violations=(), unmapped_codes={})

    violations: List[Violation] = []
    unmapped: Dict[str, str] = {}

    for diagnostic in diagnostics:
        if not isinstance(diagnostic, dict):
            continue
        code = diagnostic.get("code")
        filename = diagnostic.get("filename")
        if not code or not filename:
            continue

        span = _first_span(diagnostic)
        if span is None:
            continue
        # Oxlint span line/column are 1-based.
        line = span.get("line")
        column = span.get("column")
        if not isinstance(line, int) or not isinstance(column, int):
            continue

        result = normalizer.normalize(str(code))
        if not result.mappable:
            unmapped.setdefault(result.code, result.outcome)
            continue

        violations.append(
            Violation(
                file_path=repo_relative_path(repo_dir, str(filename)) or str(filename),
                line=line,
                column=column,
                rule_id=result.rule_id,
            )
        )

    if unmapped:
        logger.warning("%d unmapped rule(s) skipped:", len(unmapped))
        for code in sorted(unmapped):
            logger.warning("  - %s (%s)", code, unmapped[code])

    return OxlintParseResult(
        violations=tuple(finalize_violations(violations)),
        unmapped_codes=unmapped,
    )


def parse_oxlint_output(
    output_file: Path,
    repo_dir: Path,
    normalizer: Optional[RuleNormalizer] = None,
) -> OxlintParseResult:
    """Read and parse an Oxlint JSON report file."""
    raw = read_text_stripped(output_file)
    if not raw:
        return OxlintParseResult(violations=(), unmapped_codes={})

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse Oxlint JSON output: {e}") from e

    return violations_from_oxlint_payload(payload, repo_dir, normalizer)

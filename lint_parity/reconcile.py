"""lint_parity.reconcile

Exact set differences between ESLint and Oxlint violation streams.

Matching policy
---------------
A violation matches only when the *same file* contains a violation from the
other tool with the same ``line:column:rule_id`` key. Two files that share a
signature are still distinct findings. There is no tolerance window; a
finding shifted by one column is a miss on both sides.

Both streams must already be in the ESLint rule namespace. Oxlint codes that
could not be normalized have to be dropped by the caller beforehand.
"""

from __future__ import annotations

from collections import defaultdict
from typing import AbstractSet, Dict, Iterable, List, Mapping, Set

from .domain.report import ComparisonReport
from .domain.violation import Violation
from .rules.mapping import DEFAULT_RULE_MAPPING, RuleMapping
from .rules.normalize import is_unnormalized_code

FileIndex = Mapping[str, Set[str]]


class UnnormalizedRuleError(AssertionError):
    """A violation still carries an Oxlint ``namespace(rule)`` code."""


def _unique(violations: Iterable[Violation]) -> List[Violation]:
    seen: Set[Violation] = set()
    out: List[Violation] = []
    for v in violations:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def _check_normalized(
    violations: Iterable[Violation], *, stream: str, mapping: RuleMapping
) -> None:
    for v in violations:
        if is_unnormalized_code(v.rule_id, mapping):
            raise UnnormalizedRuleError(
                f"{stream} violation at {v.file_path}:{v.line}:{v.column} has "
                f"un-normalized rule id {v.rule_id!r}"
            )


def _index_by_file(violations: Iterable[Violation]) -> Dict[str, Set[str]]:
    by_file: Dict[str, Set[str]] = defaultdict(set)
    for v in violations:
        by_file[v.file_path].add(v.location_key())
    return dict(by_file)


def _only_in(primary: Iterable[Violation], other_index: FileIndex) -> List[Violation]:
    """Violations of ``primary`` with no same-file, same-key counterpart in ``other_index``."""
    out: List[Violation] = []
    for v in primary:
        keys = other_index.get(v.file_path)
        if not keys or v.location_key() not in keys:
            out.append(v)
    return out


def reconcile(
    eslint_violations: Iterable[Violation],
    oxlint_violations: Iterable[Violation],
    excluded_rules: AbstractSet[str],
    ported_rules_count: int,
    *,
    mapping: RuleMapping = DEFAULT_RULE_MAPPING,
) -> ComparisonReport:
    """Compare two normalized violation streams.

    ``excluded_rules`` are ESLint rules Oxlint does not implement; violations
    of those rules are removed from both streams before counting.
    ``ported_rules_count`` is passed through to the report unchanged.
    ``mapping`` is the one the Oxlint codes were normalized with; a rule id
    still in one of its namespaces means normalization was skipped.
    """
    if eslint_violations is None or oxlint_violations is None:
        raise TypeError("reconcile() requires sequences; pass [] for 'no violations'")

    eslint_all = _unique(eslint_violations)
    oxlint_all = _unique(oxlint_violations)
    _check_normalized(eslint_all, stream="ESLint", mapping=mapping)
    _check_normalized(oxlint_all, stream="Oxlint", mapping=mapping)

    excluded = frozenset(excluded_rules or ())
    eslint_kept = [v for v in eslint_all if v.rule_id not in excluded]
    oxlint_kept = [v for v in oxlint_all if v.rule_id not in excluded]

    oxlint_index = _index_by_file(oxlint_kept)
    eslint_index = _index_by_file(eslint_kept)

    only_in_eslint = _only_in(eslint_kept, oxlint_index)
    only_in_oxlint = _only_in(oxlint_kept, eslint_index)

    return ComparisonReport(
        eslint_total=len(eslint_kept),
        oxlint_total=len(oxlint_kept),
        only_in_eslint=tuple(only_in_eslint),
        only_in_oxlint=tuple(only_in_oxlint),
        matched_count=len(eslint_kept) - len(only_in_eslint),
        unsupported_rules=tuple(sorted(excluded)),
        ported_rules_count=ported_rules_count,
    )

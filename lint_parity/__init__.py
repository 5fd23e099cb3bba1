"""lint_parity

Core package for reconciling ESLint and Oxlint diagnostics.

What lives here
---------------
Only the pieces with real comparison semantics:

* domain types (:class:`Violation`, :class:`ComparisonReport`)
* the rule mapping tables and the Oxlint -> ESLint rule normalizer
* the reconciliation engine

Running linters, cloning repos and printing reports live in ``tools/`` and
``pipeline/``. Those layers depend on this package, never the other way round.
"""

from __future__ import annotations

from .domain import ComparisonReport, Violation
from .reconcile import UnnormalizedRuleError, reconcile
from .rules import (
    DEFAULT_RULE_MAPPING,
    NormalizeResult,
    RuleMapping,
    RuleNormalizer,
    load_rule_mapping,
    normalize_rule_code,
)

__all__ = [
    "ComparisonReport",
    "DEFAULT_RULE_MAPPING",
    "NormalizeResult",
    "RuleMapping",
    "RuleNormalizer",
    "UnnormalizedRuleError",
    "Violation",
    "load_rule_mapping",
    "normalize_rule_code",
    "reconcile",
]

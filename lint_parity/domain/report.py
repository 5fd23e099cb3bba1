"""lint_parity.domain.report

The reconciliation engine's sole output.

A :class:`ComparisonReport` is built once per comparison run and handed to the
presenter. It is frozen; sequences are stored as tuples so nothing downstream
can append to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .violation import Violation


@dataclass(frozen=True)
class ComparisonReport:
    """Counts and set differences between ESLint and Oxlint violations.

    ``eslint_total`` counts ESLint violations *after* unsupported rules were
    excluded, and always equals ``len(only_in_eslint) + matched_count``.
    """

    eslint_total: int
    oxlint_total: int
    only_in_eslint: Tuple[Violation, ...]
    only_in_oxlint: Tuple[Violation, ...]
    matched_count: int
    unsupported_rules: Tuple[str, ...]
    ported_rules_count: int

    @property
    def total_rules(self) -> int:
        return self.ported_rules_count + len(self.unsupported_rules)

    @property
    def match_ratio(self) -> Optional[float]:
        """Fraction of ESLint violations that Oxlint reproduced (None if no ESLint violations)."""
        if self.eslint_total <= 0:
            return None
        return self.matched_count / self.eslint_total

    @property
    def ported_ratio(self) -> Optional[float]:
        total = self.total_rules
        if total <= 0:
            return None
        return self.ported_rules_count / total

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "eslint_total": self.eslint_total,
            "oxlint_total": self.oxlint_total,
            "matched_count": self.matched_count,
            "only_in_eslint": [v.to_dict() for v in self.only_in_eslint],
            "only_in_oxlint": [v.to_dict() for v in self.only_in_oxlint],
            "unsupported_rules": list(self.unsupported_rules),
            "ported_rules_count": self.ported_rules_count,
            "match_ratio": self.match_ratio,
            "ported_ratio": self.ported_ratio,
        }

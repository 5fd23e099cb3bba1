"""lint_parity.domain.violation

Canonical representation of one linter finding.

A violation is identified by exactly four fields: repo-relative file path,
1-based line, 1-based column and the canonical (ESLint) rule id. Nothing else
(message text, severity, which tool produced it) takes part in matching, so
those fields are deliberately not carried.

Two violations with the same 4-tuple are the same finding. The dataclass is
frozen so instances hash by value and duplicates collapse naturally in sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


def _require_int(d: Mapping[str, Any], key: str) -> int:
    v = d.get(key)
    # bool is a subclass of int; treat as invalid.
    if v is None or isinstance(v, bool):
        raise ValueError(f"Violation field {key!r} is missing or not an integer: {v!r}")
    try:
        return int(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Violation field {key!r} is not an integer: {v!r}") from e


def _require_position(d: Mapping[str, Any], key: str) -> int:
    v = _require_int(d, key)
    if v < 1:
        raise ValueError(f"Violation field {key!r} must be 1-based (>= 1): {v!r}")
    return v


def _require_str(d: Mapping[str, Any], key: str) -> str:
    v = d.get(key)
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"Violation field {key!r} is missing or empty: {v!r}")
    return v


@dataclass(frozen=True)
class Violation:
    """One diagnostic finding in the canonical (ESLint) rule namespace."""

    file_path: str
    line: int
    column: int
    rule_id: str

    def location_key(self) -> str:
        """Per-file match key: ``line:column:rule_id``."""
        return f"{self.line}:{self.column}:{self.rule_id}"

    def sort_key(self) -> Tuple[str, int, int, str]:
        return (self.file_path, self.line, self.column, self.rule_id)

    def describe(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}  {self.rule_id}"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Violation":
        """Parse a dict (as written in a report JSON artifact)."""
        if not isinstance(d, Mapping):
            raise TypeError(f"Violation.from_dict expected mapping, got {type(d)!r}")
        return cls(
            file_path=_require_str(d, "file_path"),
            line=_require_position(d, "line"),
            column=_require_position(d, "column"),
            rule_id=_require_str(d, "rule_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "line": self.line,
            "column": self.column,
            "rule_id": self.rule_id,
        }

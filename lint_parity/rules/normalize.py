"""lint_parity.rules.normalize

Oxlint rule code -> ESLint rule id.

Resolution order:

1. exact override on the whole code (always wins)
2. the code must look like ``namespace(rule-name)``, otherwise ``malformed``
3. namespace marked as Oxlint-only -> ``no_equivalent``
4. namespace unknown -> ``unknown_namespace``
5. ``prefix + rule-name`` -> ``mapped``

Every non-mapped outcome echoes the original code back as ``rule_id`` so the
caller can log or report it. Nothing here raises for bad input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

from .mapping import DEFAULT_RULE_MAPPING, RuleMapping


OXLINT_CODE_RE = re.compile(r"^([\w-]+)\((.+)\)$")

MAPPED = "mapped"
NO_EQUIVALENT = "no_equivalent"
UNKNOWN_NAMESPACE = "unknown_namespace"
MALFORMED = "malformed"

Outcome = Literal["mapped", "no_equivalent", "unknown_namespace", "malformed"]


def looks_like_oxlint_code(value: str) -> bool:
    """True if ``value`` has the Oxlint ``namespace(rule-name)`` shape."""
    return bool(OXLINT_CODE_RE.match(value or ""))


def is_unnormalized_code(value: str, mapping: RuleMapping = DEFAULT_RULE_MAPPING) -> bool:
    """True if ``value`` is still a raw Oxlint code under ``mapping``.

    The shape alone is not enough: a core rule name may itself contain
    parentheses (``eslint(odd(name))`` maps to ``odd(name)``). Only a code
    whose namespace the mapping knows, and which no override produces, counts.
    """
    m = OXLINT_CODE_RE.match(value or "")
    if not m:
        return False
    if value in mapping.override_targets:
        return False
    namespace = m.group(1)
    return namespace in mapping.prefixes or namespace in mapping.no_equivalent


@dataclass(frozen=True)
class NormalizeResult:
    """Tagged outcome of normalizing one Oxlint rule code."""

    code: str
    rule_id: str
    outcome: Outcome

    @property
    def mappable(self) -> bool:
        return self.outcome == MAPPED


class RuleNormalizer:
    """Normalizes Oxlint codes against one immutable :class:`RuleMapping`."""

    def __init__(self, mapping: RuleMapping = DEFAULT_RULE_MAPPING) -> None:
        self._mapping = mapping

    @property
    def mapping(self) -> RuleMapping:
        return self._mapping

    def normalize(self, code: str) -> NormalizeResult:
        override = self._mapping.overrides.get(code)
        if override is not None:
            return NormalizeResult(code=code, rule_id=override, outcome=MAPPED)

        m = OXLINT_CODE_RE.match(code or "")
        if not m:
            return NormalizeResult(code=code, rule_id=code, outcome=MALFORMED)

        namespace, rule_name = m.group(1), m.group(2)

        if namespace in self._mapping.no_equivalent:
            return NormalizeResult(code=code, rule_id=code, outcome=NO_EQUIVALENT)

        prefix = self._mapping.prefixes.get(namespace)
        if prefix is None:
            return NormalizeResult(code=code, rule_id=code, outcome=UNKNOWN_NAMESPACE)

        return NormalizeResult(code=code, rule_id=f"{prefix}{rule_name}", outcome=MAPPED)


_DEFAULT_NORMALIZER = RuleNormalizer(DEFAULT_RULE_MAPPING)


def normalize_rule_code(
    code: str,
    mapping: Optional[RuleMapping] = None,
) -> NormalizeResult:
    """Normalize ``code`` with ``mapping`` (defaults to the built-in tables)."""
    if mapping is None:
        return _DEFAULT_NORMALIZER.normalize(code)
    return RuleNormalizer(mapping).normalize(code)

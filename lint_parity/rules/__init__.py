"""lint_parity.rules

Rule mapping tables and the Oxlint -> ESLint rule normalizer.
"""

from __future__ import annotations

from .mapping import (
    DEFAULT_RULE_MAPPING,
    RuleMapping,
    dump_rule_mapping_yaml,
    load_rule_mapping,
)
from .normalize import (
    MALFORMED,
    MAPPED,
    NO_EQUIVALENT,
    UNKNOWN_NAMESPACE,
    NormalizeResult,
    RuleNormalizer,
    is_unnormalized_code,
    looks_like_oxlint_code,
    normalize_rule_code,
)

__all__ = [
    "DEFAULT_RULE_MAPPING",
    "MALFORMED",
    "MAPPED",
    "NO_EQUIVALENT",
    "NormalizeResult",
    "RuleMapping",
    "RuleNormalizer",
    "UNKNOWN_NAMESPACE",
    "dump_rule_mapping_yaml",
    "load_rule_mapping",
    "is_unnormalized_code",
    "looks_like_oxlint_code",
    "normalize_rule_code",
]

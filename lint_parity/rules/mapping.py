"""lint_parity.rules.mapping

Lookup tables that translate Oxlint rule codes into ESLint rule ids.

Oxlint reports a rule as ``namespace(rule-name)``; ESLint names the same rule
``prefix/rule-name`` (or a bare name for core rules). The mapping has three
layers:

* ``overrides``      exact full-code -> ESLint id, for rules whose ESLint home
                     does not follow their Oxlint namespace (e.g. the React
                     hooks rules live in ``react-hooks/``, not ``react/``)
* ``prefixes``       namespace -> ESLint prefix (empty prefix = ESLint core)
* ``no_equivalent``  namespaces that are Oxlint-only and have no ESLint analog

The tables are built once and wrapped in read-only proxies. Overlays loaded
from YAML produce a new :class:`RuleMapping`; they never mutate the defaults.

YAML overlay format
-------------------

.. code-block:: yaml

    overrides:
      "react(exhaustive-deps)": react-hooks/exhaustive-deps
    namespaces:
      regexp: "regexp/"
    no_equivalent:
      - oxc
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union


_DEFAULT_OVERRIDES: Dict[str, str] = {
    "react(exhaustive-deps)": "react-hooks/exhaustive-deps",
    "react(rules-of-hooks)": "react-hooks/rules-of-hooks",
}

_DEFAULT_PREFIXES: Dict[str, str] = {
    "eslint": "",
    "react": "react/",
    "typescript": "@typescript-eslint/",
    "import": "import/",
    "nextjs": "@next/next/",
    "node": "n/",
    "jsx-a11y": "jsx-a11y/",
    "jsdoc": "jsdoc/",
    "jest": "jest/",
    "vitest": "vitest/",
    "unicorn": "unicorn/",
    "promise": "promise/",
    "react-perf": "react-perf/",
    "vue": "vue/",
}

# Oxc's own checks have no ESLint counterpart.
_DEFAULT_NO_EQUIVALENT: FrozenSet[str] = frozenset({"oxc"})


def _freeze(d: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class RuleMapping:
    """Immutable Oxlint -> ESLint rule mapping tables."""

    overrides: Mapping[str, str] = field(default_factory=lambda: _freeze({}))
    prefixes: Mapping[str, str] = field(default_factory=lambda: _freeze({}))
    no_equivalent: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        # Re-wrap so callers passing plain dicts cannot mutate us afterwards.
        object.__setattr__(self, "overrides", _freeze(self.overrides))
        object.__setattr__(self, "prefixes", _freeze(self.prefixes))
        object.__setattr__(self, "no_equivalent", frozenset(self.no_equivalent))

        both = sorted(set(self.prefixes) & self.no_equivalent)
        if both:
            raise ValueError(
                f"Namespaces cannot have both a prefix and no equivalent: {both}"
            )

        empty = sorted(code for code, target in self.overrides.items() if not target.strip())
        if empty:
            raise ValueError(f"Overrides must map to a non-empty rule id: {empty}")

    def merged(
        self,
        *,
        overrides: Optional[Mapping[str, str]] = None,
        prefixes: Optional[Mapping[str, str]] = None,
        no_equivalent: Optional[Iterable[str]] = None,
    ) -> "RuleMapping":
        """Return a new mapping with the given entries layered on top.

        A namespace newly given a prefix stops being "no equivalent" and vice
        versa, so an overlay can re-home either way.
        """
        new_prefixes = dict(self.prefixes)
        new_no_eq = set(self.no_equivalent)

        for ns, prefix in (prefixes or {}).items():
            new_prefixes[ns] = prefix
            new_no_eq.discard(ns)

        for ns in no_equivalent or ():
            if prefixes and ns in prefixes:
                raise ValueError(
                    f"Namespace {ns!r} is listed both with a prefix and as no_equivalent"
                )
            new_no_eq.add(ns)
            new_prefixes.pop(ns, None)

        new_overrides = dict(self.overrides)
        new_overrides.update(overrides or {})

        return RuleMapping(
            overrides=new_overrides,
            prefixes=new_prefixes,
            no_equivalent=frozenset(new_no_eq),
        )

    @property
    def override_targets(self) -> FrozenSet[str]:
        """Canonical ids produced by ``overrides``."""
        return frozenset(self.overrides.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overrides": dict(sorted(self.overrides.items())),
            "namespaces": dict(sorted(self.prefixes.items())),
            "no_equivalent": sorted(self.no_equivalent),
        }


DEFAULT_RULE_MAPPING = RuleMapping(
    overrides=_DEFAULT_OVERRIDES,
    prefixes=_DEFAULT_PREFIXES,
    no_equivalent=_DEFAULT_NO_EQUIVALENT,
)


def _str_mapping(raw: Any, *, key: str, source: Path) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Rule mapping '{key}' must be a mapping in {source}")
    out: Dict[str, str] = {}
    for k, v in raw.items():
        if not isinstance(k, str) or not k.strip():
            raise ValueError(f"Rule mapping '{key}' has an empty or non-string key in {source}")
        # YAML turns an empty value into None; an empty prefix is legitimate.
        out[k.strip()] = "" if v is None else str(v)
    return out


def load_rule_mapping(
    path: Union[str, Path],
    *,
    base: RuleMapping = DEFAULT_RULE_MAPPING,
) -> RuleMapping:
    """Load a YAML overlay and layer it on top of ``base``."""
    import yaml

    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Rule mapping not found: {p}")
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Rule mapping YAML must be a mapping/object at top level: {p}")

    unknown = sorted(set(raw) - {"overrides", "namespaces", "no_equivalent"})
    if unknown:
        raise ValueError(f"Unknown rule mapping keys in {p}: {unknown}")

    no_eq_raw = raw.get("no_equivalent")
    if no_eq_raw is None:
        no_eq_raw = []
    if not isinstance(no_eq_raw, list):
        raise ValueError(f"Rule mapping 'no_equivalent' must be a list in {p}")

    return base.merged(
        overrides=_str_mapping(raw.get("overrides"), key="overrides", source=p),
        prefixes=_str_mapping(raw.get("namespaces"), key="namespaces", source=p),
        no_equivalent=[str(x).strip() for x in no_eq_raw if x is not None and str(x).strip()],
    )


def dump_rule_mapping_yaml(mapping: RuleMapping) -> str:
    """Render a mapping in the overlay format (useful for inspecting the effective tables)."""
    import yaml

    return yaml.safe_dump(mapping.to_dict(), sort_keys=False, default_flow_style=False)

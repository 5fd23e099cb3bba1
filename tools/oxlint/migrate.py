"""tools/oxlint/migrate.py

Run ``@oxlint/migrate`` and work out which ESLint rules made it across.

Two facts come out of a migration:

* the ESLint rules Oxlint cannot run (parsed from ``--details`` output); these
  are excluded from the comparison so they count against neither tool
* how many rules ended up active in the generated ``.oxlintrc.json``
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Set, Tuple

from tools.core_cmd import run_cmd
from tools.io import read_json

logger = logging.getLogger(__name__)

OXLINT_CONFIG_NAME = ".oxlintrc.json"

_SECTION_MARKERS = ("unsupported", "not supported", "cannot migrate")

# Bullet items that look like plugin rule ids: "- @typescript-eslint/no-floating-promises (not supported)"
_RULE_ITEM_RE = re.compile(r"[-•*]\s+([@\w][\w/@-]*/[\w-]+)")

_OFF_VALUES = ("off", "allow", 0, "0")


@dataclass(frozen=True)
class MigrationResult:
    unsupported_rules: Tuple[str, ...]
    ported_rules_count: int


def parse_migration_output(output: str) -> List[str]:
    """Extract unsupported rule ids from ``@oxlint/migrate --details`` output.

    Once a line mentions an unsupported section, every following bullet that
    looks like ``plugin/rule`` is collected. Result is deduplicated in
    first-seen order.
    """
    seen: Set[str] = set()
    unsupported: List[str] = []
    in_section = False

    for line in (output or "").splitlines():
        lower = line.lower()
        if any(marker in lower for marker in _SECTION_MARKERS):
            in_section = True
        if not in_section:
            continue

        m = _RULE_ITEM_RE.search(line)
        if m and m.group(1) not in seen:
            seen.add(m.group(1))
            unsupported.append(m.group(1))

    return unsupported


def _is_active(setting: Any) -> bool:
    if isinstance(setting, list):
        if not setting:
            return False
        setting = setting[0]
    if isinstance(setting, str):
        return setting.strip().lower() not in _OFF_VALUES
    return setting not in _OFF_VALUES


def _active_rules(rules: Any) -> Iterable[str]:
    if not isinstance(rules, dict):
        return []
    return [name for name, setting in rules.items() if _is_active(setting)]


def count_ported_rules(config_path: Path) -> int:
    """Number of distinct rules enabled in a generated Oxlint config."""
    if not config_path.exists():
        return 0
    try:
        config = read_json(config_path)
    except ValueError as e:
        logger.warning("Could not parse %s: %s", config_path, e)
        return 0
    if not isinstance(config, dict):
        return 0

    active: Set[str] = set(_active_rules(config.get("rules")))
    for override in config.get("overrides") or []:
        if isinstance(override, dict):
            active.update(_active_rules(override.get("rules")))
    return len(active)


def migrate_command(*, type_aware: bool = False) -> List[str]:
    cmd = ["npx", "--yes", "@oxlint/migrate", "--details"]
    if type_aware:
        cmd.append("--type-aware")
    return cmd


def migrate_to_oxlint(repo_dir: Path, *, type_aware: bool = False) -> MigrationResult:
    """Generate ``.oxlintrc.json`` from the repo's ESLint flat config."""
    logger.info("Installing @oxlint/migrate and oxlint...")
    warm = run_cmd(["npx", "--yes", "oxlint@latest", "--version"], cwd=repo_dir)
    if warm.exit_code != 0:
        raise RuntimeError(f"Could not install oxlint (exit code {warm.exit_code}):\n{warm.stderr}")

    logger.info("Running @oxlint/migrate...")
    res = run_cmd(migrate_command(type_aware=type_aware), cwd=repo_dir)
    output = f"{res.stdout}\n{res.stderr}"

    if res.exit_code != 0:
        logger.warning("Migration exited with code %s. Continuing...", res.exit_code)
        logger.warning("Migration output:\n%s", output)

    unsupported = parse_migration_output(output)
    ported = count_ported_rules(repo_dir / OXLINT_CONFIG_NAME)
    logger.info(
        "Migration complete. %d rules ported, %d unsupported rules found.",
        ported,
        len(unsupported),
    )
    return MigrationResult(unsupported_rules=tuple(unsupported), ported_rules_count=ported)

"""pipeline.compare

High-level orchestration for an ESLint vs Oxlint comparison.

Phases
------
1. acquire the repo (clone or local path) and install dependencies
2. run ESLint
3. migrate the ESLint config to ``.oxlintrc.json``
4. run Oxlint
5. parse both outputs into canonical violations
6. reconcile
7. collect tool versions for the report

This module is intentionally "boring": it wires together the adapters in
``tools/`` and the engine in ``lint_parity``. It does no comparison itself.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, Optional

from lint_parity.reconcile import reconcile
from lint_parity.rules.mapping import DEFAULT_RULE_MAPPING, RuleMapping, load_rule_mapping
from lint_parity.rules.normalize import RuleNormalizer

from tools import eslint as eslint_tool
from tools import oxlint as oxlint_tool
from tools.core_repo import acquire_repo, get_package_version

from pipeline.model import ComparisonRequest, ComparisonRun, ToolVersions

logger = logging.getLogger(__name__)


def resolve_rule_mapping(rule_map_path: Optional[Path] = None) -> RuleMapping:
    """Built-in mapping, optionally overlaid by ``rule_map_path`` or ``LINT_PARITY_RULE_MAP``."""
    path = rule_map_path
    if path is None:
        env_path = os.environ.get("LINT_PARITY_RULE_MAP", "").strip()
        path = Path(env_path) if env_path else None
    if path is None:
        return DEFAULT_RULE_MAPPING
    logger.info("Loading rule mapping overlay from %s", path)
    return load_rule_mapping(path)


def collect_versions(repo_dir: Path, *, type_aware: bool = False) -> ToolVersions:
    return ToolVersions(
        eslint=get_package_version(repo_dir, "eslint"),
        oxlint=get_package_version(repo_dir, "oxlint"),
        oxlint_tsgolint=get_package_version(repo_dir, "oxlint-tsgolint") if type_aware else None,
    )


def run_comparison(request: ComparisonRequest) -> ComparisonRun:
    """Run both linters on one repo and reconcile their findings."""
    normalizer = RuleNormalizer(resolve_rule_mapping(request.rule_map_path))

    label = request.repo_url or str(request.repo_path)
    logger.info("Starting comparison for: %s", label)
    if request.branch:
        logger.info("Branch: %s", request.branch)
    if request.type_aware:
        logger.info("Mode: type-aware")

    repo = acquire_repo(
        repo_url=request.repo_url,
        repo_path=request.repo_path,
        branch=request.branch,
        workdir=request.workdir,
        install=request.install,
    )
    repo_dir = repo.repo_path
    logger.info("Repo ready at: %s", repo_dir)

    eslint_output, eslint_violations = eslint_tool.execute(repo_dir)
    migration = oxlint_tool.migrate_to_oxlint(repo_dir, type_aware=request.type_aware)
    oxlint_output, oxlint_parsed = oxlint_tool.execute(
        repo_dir, type_aware=request.type_aware, normalizer=normalizer
    )

    logger.info("ESLint: %d total violations", len(eslint_violations))
    logger.info("Oxlint: %d total violations", len(oxlint_parsed.violations))
    logger.info("Unsupported rules (will be filtered): %d", len(migration.unsupported_rules))

    report = reconcile(
        eslint_violations,
        oxlint_parsed.violations,
        frozenset(migration.unsupported_rules),
        migration.ported_rules_count,
        mapping=normalizer.mapping,
    )

    return ComparisonRun(
        report=report,
        repo_label=label,
        versions=collect_versions(repo_dir, type_aware=request.type_aware),
        repo_dir=repo_dir,
        eslint_output=eslint_output,
        oxlint_output=oxlint_output,
        unmapped_codes=dict(oxlint_parsed.unmapped_codes),
    )


def reconcile_files(
    *,
    eslint_json: Path,
    oxlint_json: Path,
    repo_dir: Path,
    unsupported_rules: AbstractSet[str] = frozenset(),
    ported_rules_count: int = 0,
    rule_map_path: Optional[Path] = None,
) -> ComparisonRun:
    """Reconcile previously captured ESLint/Oxlint JSON reports (no linters run).

    ``repo_dir`` is the root the reports' absolute paths are relative to.
    Versions are read from ``repo_dir/node_modules`` when present.
    """
    normalizer = RuleNormalizer(resolve_rule_mapping(rule_map_path))

    eslint_violations = eslint_tool.parse_eslint_output(eslint_json, repo_dir)
    oxlint_parsed = oxlint_tool.parse_oxlint_output(oxlint_json, repo_dir, normalizer)

    report = reconcile(
        eslint_violations,
        oxlint_parsed.violations,
        frozenset(unsupported_rules),
        ported_rules_count,
        mapping=normalizer.mapping,
    )

    return ComparisonRun(
        report=report,
        repo_label=str(repo_dir),
        versions=collect_versions(repo_dir),
        repo_dir=repo_dir,
        eslint_output=eslint_json,
        oxlint_output=oxlint_json,
        unmapped_codes=dict(oxlint_parsed.unmapped_codes),
    )

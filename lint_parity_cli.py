#!/usr/bin/env python3
"""
CLI for comparing ESLint and Oxlint on the same repository.

Modes:
  1) compare   - clone/install a repo, run ESLint, migrate to Oxlint, run Oxlint, reconcile
  2) reconcile - reconcile previously captured ESLint/Oxlint JSON reports (no linters run)
  3) rules     - print the effective Oxlint -> ESLint rule mapping

Usage:
  python lint_parity_cli.py https://github.com/org/repo.git
  python lint_parity_cli.py https://github.com/org/repo.git --branch main --type-aware
  python lint_parity_cli.py --repo-path ../my-app --skip-install --json-out report.json
  python lint_parity_cli.py --mode reconcile --repo-path ../my-app \\
      --eslint-json eslint-output.json --oxlint-json oxlint-output.json \\
      --unsupported unsupported.txt --ported-count 120
  python lint_parity_cli.py --mode rules --rule-map mappings/rule_overrides.example.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import FrozenSet, List, Optional

from dotenv import load_dotenv

from lint_parity.rules.mapping import dump_rule_mapping_yaml

from pipeline.compare import reconcile_files, resolve_rule_mapping, run_comparison
from pipeline.model import ComparisonRequest, ComparisonRun
from pipeline.report import render_comparison_text, write_report_json

ROOT_DIR = Path(__file__).resolve().parent
ENV_PATH = ROOT_DIR / ".env"

logger = logging.getLogger("lint_parity")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare ESLint and Oxlint diagnostics on one repository after migration."
    )

    parser.add_argument(
        "--mode",
        choices=["compare", "reconcile", "rules"],
        default="compare",
        help="compare = run both linters, reconcile = use existing JSON reports, rules = print rule mapping",
    )
    parser.add_argument("repo_url", nargs="?", help="Git URL of the repository to compare")
    parser.add_argument("--repo-url", dest="repo_url_opt", help="Git URL (alternative to the positional argument)")
    parser.add_argument("--repo-path", help="Local repo path (skip clone)")
    parser.add_argument("--branch", help="Branch to clone (default: remote HEAD)")
    parser.add_argument("--type-aware", action="store_true", help="Run Oxlint (and the migration) in type-aware mode")
    parser.add_argument(
        "--workdir",
        help="Where to clone repos (default: $LINT_PARITY_WORKDIR or ./.comparator-workdir)",
    )
    parser.add_argument("--skip-install", action="store_true", help="Do not install node dependencies")
    parser.add_argument(
        "--rule-map",
        help="YAML overlay for the Oxlint -> ESLint rule mapping (default: $LINT_PARITY_RULE_MAP)",
    )

    # reconcile mode
    parser.add_argument("--eslint-json", help="(reconcile) ESLint --format json report")
    parser.add_argument("--oxlint-json", help="(reconcile) Oxlint --format json report")
    parser.add_argument(
        "--unsupported",
        help="(reconcile) Unsupported ESLint rules: comma-separated list, or a file with one rule per line",
    )
    parser.add_argument("--ported-count", type=int, default=0, help="(reconcile) Number of ported rules")

    # output
    parser.add_argument("--json-out", help="Also write the full report as JSON to this path")
    parser.add_argument(
        "--max-items",
        type=int,
        default=50,
        help="Cap each 'only in' list in the console output (-1 = show all; default: 50)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(name)s] %(message)s",
        stream=sys.stderr,
    )


def parse_unsupported(raw: Optional[str]) -> FrozenSet[str]:
    """Comma-separated rule ids, or a path to a file with one rule per line."""
    if not raw:
        return frozenset()
    p = Path(raw)
    if p.is_file():
        items: List[str] = p.read_text(encoding="utf-8").splitlines()
    else:
        items = raw.split(",")
    return frozenset(x.strip() for x in items if x.strip() and not x.strip().startswith("#"))


def _path_or_none(raw: Optional[str]) -> Optional[Path]:
    return Path(raw).expanduser() if raw else None


def _run_compare(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ComparisonRun:
    repo_url = args.repo_url or args.repo_url_opt
    if not repo_url and not args.repo_path:
        parser.error("compare mode needs a repository URL or --repo-path")

    request = ComparisonRequest(
        repo_url=repo_url,
        repo_path=_path_or_none(args.repo_path),
        branch=args.branch,
        type_aware=args.type_aware,
        workdir=_path_or_none(args.workdir),
        install=not args.skip_install,
        rule_map_path=_path_or_none(args.rule_map),
    )
    return run_comparison(request)


def _run_reconcile(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ComparisonRun:
    if not args.eslint_json or not args.oxlint_json:
        parser.error("reconcile mode needs --eslint-json and --oxlint-json")

    return reconcile_files(
        eslint_json=Path(args.eslint_json),
        oxlint_json=Path(args.oxlint_json),
        repo_dir=Path(args.repo_path or ".").expanduser().resolve(),
        unsupported_rules=parse_unsupported(args.unsupported),
        ported_rules_count=args.ported_count,
        rule_map_path=_path_or_none(args.rule_map),
    )


def main(argv: Optional[List[str]] = None) -> int:
    # Load .env from the project root and the CWD; real env vars win.
    load_dotenv(ENV_PATH)
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.mode == "rules":
            print(dump_rule_mapping_yaml(resolve_rule_mapping(_path_or_none(args.rule_map))), end="")
            return 0

        if args.mode == "reconcile":
            run = _run_reconcile(args, parser)
        else:
            run = _run_compare(args, parser)

        max_items = None if args.max_items is not None and args.max_items < 0 else args.max_items
        print()
        print(
            render_comparison_text(
                run.report,
                repo_url=run.repo_label,
                versions=run.versions,
                max_violations=max_items,
            ),
            end="",
        )

        if args.json_out:
            out = write_report_json(Path(args.json_out), run)
            print(f"\nFull report written to {out}")
    except Exception as e:
        logger.debug("Comparison failed", exc_info=True)
        print(f"\n[lint-parity] Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

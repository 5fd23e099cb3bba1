"""tools/oxlint/runner.py

Tool-specific execution plumbing for Oxlint.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tools.core_cmd import run_cmd
from tools.io import write_text

logger = logging.getLogger(__name__)

OXLINT_OUTPUT_NAME = "oxlint-output.json"
EMPTY_OXLINT_OUTPUT = '{"diagnostics":[]}'


def oxlint_command(*, type_aware: bool = False) -> list:
    cmd = ["npx", "oxlint", "--format", "json"]
    if type_aware:
        cmd.append("--type-aware")
    return cmd


def run_oxlint(repo_dir: Path, *, type_aware: bool = False) -> Path:
    """Run Oxlint with the migrated config and return the path of its JSON report."""
    output_file = repo_dir / OXLINT_OUTPUT_NAME

    logger.info("Running Oxlint%s...", " (type-aware)" if type_aware else "")
    res = run_cmd(oxlint_command(type_aware=type_aware), cwd=repo_dir)

    # Oxlint exits non-zero when violations are found; the JSON on stdout is
    # what matters.
    if res.exit_code != 0:
        logger.debug("Oxlint exited with code %s", res.exit_code)

    write_text(output_file, res.stdout.strip() or EMPTY_OXLINT_OUTPUT)
    logger.info("Output written to %s", output_file)
    return output_file

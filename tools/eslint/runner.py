"""tools/eslint/runner.py

Tool-specific execution plumbing for ESLint.
Keeps ESLint CLI quirks (config detection, exit codes, output file) close to
the tool.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tools.core_cmd import run_cmd
from tools.core_repo import exec_command
from tools.io import write_text

logger = logging.getLogger(__name__)

ESLINT_OUTPUT_NAME = "eslint-output.json"

FLAT_CONFIGS = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
    "eslint.config.ts",
    "eslint.config.mts",
)

LEGACY_CONFIGS = (
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.yaml",
    ".eslintrc.yml",
    ".eslintrc.json",
)


class LegacyEslintConfigError(RuntimeError):
    """The repo uses an ``.eslintrc*`` config, which ``@oxlint/migrate`` cannot read."""


def detect_eslint_config(repo_dir: Path) -> bool:
    """True if a flat config exists; raises for legacy configs; False if none."""
    for name in FLAT_CONFIGS:
        if (repo_dir / name).exists():
            logger.info("Found flat config: %s", name)
            return True

    for name in LEGACY_CONFIGS:
        if (repo_dir / name).exists():
            raise LegacyEslintConfigError(
                f"Legacy ESLint config detected ({name}). Only flat config "
                "(eslint.config.*) is supported by @oxlint/migrate; please migrate to flat config first."
            )

    return False


def run_eslint(repo_dir: Path) -> Path:
    """Run ESLint over the repo and return the path of its JSON report."""
    output_file = repo_dir / ESLINT_OUTPUT_NAME

    if not detect_eslint_config(repo_dir):
        raise RuntimeError("No ESLint configuration found in target repo. Cannot proceed.")

    logger.info("Running ESLint...")
    cmd = exec_command(
        repo_dir,
        "eslint",
        [".", "--format", "json", "--output-file", str(output_file)],
    )
    res = run_cmd(cmd, cwd=repo_dir)

    # ESLint exits with 1 when violations are found; only >1 is a crash.
    if res.exit_code > 1:
        raise RuntimeError(f"ESLint failed with exit code {res.exit_code}:\n{res.stderr}")

    # --output-file is skipped by some ESLint versions when nothing is reported.
    if not output_file.exists():
        write_text(output_file, res.stdout.strip() or "[]")
    elif not output_file.read_text(encoding="utf-8").strip():
        write_text(output_file, "[]")

    logger.info("Output written to %s", output_file)
    return output_file

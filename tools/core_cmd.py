"""tools/core_cmd.py

Command-execution helpers shared across linter adapters.

This module deliberately avoids tool-specific knowledge: :func:`run_cmd`
runs a subprocess (no shell=True) and captures its output.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE = 124


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: str
    stderr: str


def default_timeout_seconds() -> int:
    """``LINT_PARITY_CMD_TIMEOUT`` in seconds; 0 (the default) means no timeout."""
    raw = os.environ.get("LINT_PARITY_CMD_TIMEOUT", "").strip()
    try:
        return max(0, int(raw)) if raw else 0
    except ValueError:
        logger.warning("Ignoring non-integer LINT_PARITY_CMD_TIMEOUT=%r", raw)
        return 0


def run_cmd(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    timeout_seconds: Optional[int] = None,
    env: Optional[Dict[str, str]] = None,
    capture: bool = True,
) -> CmdResult:
    """Run a subprocess (no ``shell=True``).

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found). A timeout is reported as exit code 124.

    With ``capture=False`` the child inherits this process's stdout/stderr
    (used for long installs where live progress matters).
    """
    if timeout_seconds is None:
        timeout_seconds = default_timeout_seconds()

    # If env is provided, merge it onto the current process environment.
    env2 = None
    if env is not None:
        env2 = os.environ.copy()
        env2.update(env)

    command_str = " ".join(cmd)
    logger.debug("Running: %s (cwd=%s)", command_str, cwd)

    t0 = time.time()
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            text=True,
            capture_output=capture,
            timeout=timeout_seconds if timeout_seconds and timeout_seconds > 0 else None,
            env=env2,
        )
    except subprocess.TimeoutExpired as e:
        logger.warning("Command timed out after %ss: %s", timeout_seconds, command_str)
        return CmdResult(
            exit_code=TIMEOUT_EXIT_CODE,
            elapsed_seconds=time.time() - t0,
            command_str=command_str,
            stdout=e.stdout if isinstance(e.stdout, str) else "",
            stderr=e.stderr if isinstance(e.stderr, str) else "",
        )

    elapsed = time.time() - t0
    if proc.stderr:
        # Many tools write progress to stderr even on success.
        logger.debug("stderr from %s:\n%s", cmd[0], proc.stderr)

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=command_str,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )

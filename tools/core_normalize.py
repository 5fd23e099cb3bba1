"""tools/core_normalize.py

Shared normalization helpers for linter adapters.

Parsers are allowed to be "thin" and focused on reading tool output. These
helpers give them one way to turn tool paths into repo-relative paths and to
order violations deterministically so runs can be diffed.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional

from lint_parity.domain.violation import Violation

_SLASH_RE = re.compile(r"/+")


def repo_relative_path(repo_dir: Path, tool_path: Optional[str]) -> Optional[str]:
    """Convert a tool-reported path to a ``/``-separated repo-relative path.

    Relative paths are taken as already relative to the repo root. Absolute
    paths outside the repo are returned relative anyway (``../x``) so two runs
    against different checkouts of the same repo still agree.
    """
    if not tool_path:
        return None

    s = str(tool_path)
    if os.path.isabs(s):
        root = os.path.realpath(str(repo_dir))
        s = os.path.relpath(os.path.realpath(s), root)

    s = s.replace("\\", "/")
    while s.startswith("./"):
        s = s[2:]
    return _SLASH_RE.sub("/", s)


def finalize_violations(violations: Iterable[Violation]) -> List[Violation]:
    """Drop duplicate findings and sort by (file, line, column, rule)."""
    return sorted(set(violations), key=Violation.sort_key)

"""tools/core_root.py

Where cloned target repositories live.

Kept in a tiny module so other ``core_*`` modules can import it without
creating circular imports.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_WORKDIR_NAME = ".comparator-workdir"


def default_workdir() -> Path:
    """Directory that holds cloned target repos.

    ``LINT_PARITY_WORKDIR`` overrides the default ``./.comparator-workdir``.
    """
    raw = os.environ.get("LINT_PARITY_WORKDIR", "").strip()
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd() / DEFAULT_WORKDIR_NAME

#!/usr/bin/env python3
"""tools/io.py

Single source of truth for tiny filesystem helpers used across the adapters.

Keep the actual implementations here and have other modules import from this
module, so two helpers with the same name cannot slowly diverge (different
JSON formatting options, different newline handling, etc.).

This module contains ONLY filesystem IO (no parsing policy). Tool output
parsing lives in tools/eslint and tools/oxlint.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def write_json(path: Path, data: Any) -> None:
    """Write pretty JSON to disk (UTF-8), atomically via a sibling temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def read_json(path: Path) -> Any:
    """Read JSON from disk (UTF-8)."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_text_stripped(path: Path) -> str:
    """Read a text file and strip surrounding whitespace ('' for an empty file)."""
    return path.read_text(encoding="utf-8").strip()


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")

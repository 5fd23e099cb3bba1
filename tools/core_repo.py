"""tools/core_repo.py

Repository acquisition helpers.

The comparator needs a consistent way to acquire a JavaScript/TypeScript repo
to lint:

* If the user provides a local path -> use it.
* Else, shallow-clone (or reuse) a repo URL under the work directory.

Either way, dependencies are installed with the repo's own package manager so
ESLint plugins and ``node_modules/.bin`` linters resolve exactly as in CI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .core_cmd import run_cmd
from .core_root import default_workdir

logger = logging.getLogger(__name__)

_FROZEN_INSTALL = {
    "pnpm": ["pnpm", "install", "--frozen-lockfile"],
    "yarn": ["yarn", "install", "--frozen-lockfile"],
    "npm": ["npm", "ci"],
}

_FALLBACK_INSTALL = {
    "pnpm": ["pnpm", "install"],
    "yarn": ["yarn", "install"],
    "npm": ["npm", "install"],
}


def get_repo_name(repo_url: str) -> str:
    """Turn a Git URL into a simple repo name.

    Examples:
      https://github.com/oxc-project/oxc.git -> "oxc"
      git@github.com:vercel/next.js.git      -> "next.js"
      https://github.com/org/repo/           -> "repo"
    """
    last = repo_url.rstrip("/").split("/")[-1]
    name = last[:-4] if last.endswith(".git") else last
    return name or "repo"


def detect_package_manager(repo_dir: Path) -> str:
    """Pick the package manager from the lockfile present (npm by default)."""
    if (repo_dir / "pnpm-lock.yaml").exists():
        return "pnpm"
    if (repo_dir / "yarn.lock").exists():
        return "yarn"
    return "npm"


def exec_command(repo_dir: Path, binary: str, args: List[str]) -> List[str]:
    """Command that runs a locally installed ``binary`` through the repo's package manager."""
    pm = detect_package_manager(repo_dir)
    if pm == "pnpm":
        return ["pnpm", "exec", binary, *args]
    if pm == "yarn":
        return ["yarn", "exec", binary, *args]
    return ["npx", binary, *args]


def clone_repo(
    repo_url: str,
    *,
    branch: Optional[str] = None,
    workdir: Optional[Path] = None,
) -> Path:
    """Shallow-clone ``repo_url`` into ``workdir/<repo_name>``.

    If the directory already exists it is reused as-is; delete it to re-clone.
    """
    base = workdir if workdir is not None else default_workdir()
    base.mkdir(parents=True, exist_ok=True)

    path = base / get_repo_name(repo_url)
    if path.exists():
        logger.info("Directory %s already exists, skipping clone.", path)
        logger.info("To re-clone, delete the directory and run again.")
        return path.resolve()

    logger.info("Cloning %s into %s (shallow)...", repo_url, path)
    cmd = ["git", "clone", "--depth", "1", repo_url, str(path)]
    if branch:
        cmd += ["--branch", branch]
    cmd.append("--single-branch")

    res = run_cmd(cmd, capture=False)
    if res.exit_code != 0:
        raise RuntimeError(f"git clone failed with exit code {res.exit_code}")

    return path.resolve()


def install_dependencies(repo_dir: Path) -> str:
    """Install node dependencies; retry without the frozen lockfile on failure.

    Returns the package manager used.
    """
    pm = detect_package_manager(repo_dir)
    logger.info("Detected package manager: %s", pm)
    logger.info("Installing dependencies in %s...", repo_dir)

    res = run_cmd(_FROZEN_INSTALL[pm], cwd=repo_dir, capture=False)
    if res.exit_code == 0:
        return pm

    logger.warning("Frozen install failed, retrying without frozen lockfile...")
    res = run_cmd(_FALLBACK_INSTALL[pm], cwd=repo_dir, capture=False)
    if res.exit_code != 0:
        raise RuntimeError(
            f"Dependency install failed ({res.command_str}) with exit code {res.exit_code}"
        )
    return pm


def get_package_version(repo_dir: Path, package_name: str) -> str:
    """Version of an installed node package, or ``"unknown"``."""
    pkg_json = repo_dir / "node_modules" / package_name / "package.json"
    try:
        data = json.loads(pkg_json.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return "unknown"
    version = data.get("version") if isinstance(data, dict) else None
    return str(version) if version else "unknown"


@dataclass(frozen=True)
class TargetRepo:
    repo_path: Path
    repo_name: str
    repo_url: Optional[str]
    package_manager: Optional[str]


def acquire_repo(
    *,
    repo_url: Optional[str],
    repo_path: Optional[Union[str, Path]] = None,
    branch: Optional[str] = None,
    workdir: Optional[Path] = None,
    install: bool = True,
) -> TargetRepo:
    """Standard repo acquisition for a comparison run.

    If ``repo_path`` is provided: use it, do not clone.
    Else: clone/reuse ``repo_url`` under ``workdir``.
    """
    if repo_path:
        p = Path(repo_path).expanduser().resolve()
        if not p.is_dir():
            raise FileNotFoundError(f"Repo path does not exist or is not a directory: {p}")
        name = p.name
    elif repo_url:
        p = clone_repo(repo_url, branch=branch, workdir=workdir)
        name = get_repo_name(repo_url)
    else:
        raise ValueError("acquire_repo requires either repo_url or repo_path.")

    pm = install_dependencies(p) if install else None
    return TargetRepo(repo_path=p, repo_name=name, repo_url=repo_url, package_manager=pm)

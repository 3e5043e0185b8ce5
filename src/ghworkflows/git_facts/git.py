# git.py
# Locating the Git repository a workflow script lives in.
# Rendering never shells out to git; the repository root is found on disk.

from __future__ import annotations

from pathlib import Path
from typing import Optional


def find_git_root(start: Path) -> Optional[Path]:
    """
    Return the closest directory at or above `start` that contains `.git`.

    `.git` may be a directory (regular clone) or a file (worktrees and
    submodules).

    Args:
        start: A file or directory inside the repository.

    Returns:
        The repository root, or None when `start` is not inside a repository.
    """
    start = Path(start).absolute()
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def relative_posix_path(path: Path, root: Path) -> str:
    """
    Path of `path` relative to `root`, with forward slashes on every OS.

    Relative paths are resolved against the current working directory first.

    Raises:
        ValueError: If `path` is not inside `root`.
    """
    return Path(path).absolute().relative_to(Path(root).absolute()).as_posix()

"""
config.py — process-wide constants for the git source-path service.

This module is intentionally small and import-safe. It defines the default
on-disk **cache directory** under which remote repositories are checked out
and the **default branch** used when a source path names none.

Nothing here touches the filesystem; the cache directory is only computed.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_cache_dir

APP: str = "gitpath"

# Base directory for local checkouts of remote repositories:
#   <user_cache_dir(APP)>/repos
CACHE_DIR: Path = Path(user_cache_dir(APP)) / "repos"

DEFAULT_BRANCH: str = "master"

__all__ = [
    "APP",
    "CACHE_DIR",
    "DEFAULT_BRANCH",
]

"""
repo_fs.py — local filesystem layout for cached git repositories.

Responsibilities
----------------
- Convert a repository URL into a deterministic on-disk destination under
  `CACHE_DIR`.

Design
------
We store checkouts under:
    <CACHE_DIR>/<sanitized authority + path>

The name comes from `build_path_from_url`, so two URLs that differ only in
credentials share one checkout. The destination is computed, never created.
"""

from __future__ import annotations

from pathlib import Path

from .config import CACHE_DIR
from .urls import build_path_from_url


def repo_cache_dir(url: str, base: Path | str = CACHE_DIR) -> Path:
    """
    Compute the destination directory for a repo checkout.

    Args:
        url: Any supported remote URL (HTTPS/SSH/scp-like/file).
        base: Directory that holds all checkouts (defaults to `CACHE_DIR`).

    Raises:
        MalformedUrlError: if the URL cannot be parsed.
    """
    return Path(base) / build_path_from_url(url)

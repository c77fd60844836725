"""
Public facade for the git source-path service.

This module re-exports the public API from the internal submodules:

- the source path grammar (`parse_source_path`, `format_source_path`,
  `build_source_path`) and the resolved `SourcePath` it produces;
- the URL sanitizer (`build_path_from_url`, `sanitize_file_name`) and the
  cache layout built on it (`repo_cache_dir`);
- the error hierarchy rooted at `SourcePathError`.

Everything here is pure computation: no git operations, no filesystem or
network access. Repository roots and path joining come from the provider
passed to `parse_source_path`.
"""

from __future__ import annotations

from gitpath.data.models import SourcePath

from .config import CACHE_DIR, DEFAULT_BRANCH
from .errors import (
    SourcePathError,
    MalformedSpecError,
    UnknownRepositoryError,
    NoRepositoriesConfiguredError,
    MalformedUrlError,
)
from .repo_fs import repo_cache_dir
from .source_path import parse_source_path, format_source_path, build_source_path
from .urls import build_path_from_url, sanitize_file_name

__all__ = [
    "CACHE_DIR",
    "DEFAULT_BRANCH",
    "SourcePath",
    "parse_source_path",
    "format_source_path",
    "build_source_path",
    "build_path_from_url",
    "sanitize_file_name",
    "repo_cache_dir",
    "SourcePathError",
    "MalformedSpecError",
    "UnknownRepositoryError",
    "NoRepositoriesConfiguredError",
    "MalformedUrlError",
]

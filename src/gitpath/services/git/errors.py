"""
errors.py — custom exceptions used across the git source-path service.

Every error keeps the offending value as an attribute so callers (a
configuration UI, a build step) can present an actionable message.

Public API:
- SourcePathError
- MalformedSpecError
- UnknownRepositoryError
- NoRepositoriesConfiguredError
- MalformedUrlError
"""

from __future__ import annotations


class SourcePathError(ValueError):
    """
    Base class for source-path errors in this package.

    Subclassing ValueError keeps behavior consistent with code that already
    catches ValueError for bad input, while allowing callers to catch every
    source-path problem via `SourcePathError`.
    """


class MalformedSpecError(SourcePathError):
    """The source path string does not conform to the grammar."""

    def __init__(self, spec: str):
        super().__init__(f"Invalid source path (missing repository name): {spec!r}")
        self.spec = spec


class UnknownRepositoryError(SourcePathError):
    """The named repository is not present in the catalog."""

    def __init__(self, repository_name: str):
        super().__init__(f"Invalid repository: {repository_name}")
        self.repository_name = repository_name


class NoRepositoriesConfiguredError(SourcePathError):
    """No repository name was given and the catalog is empty."""

    def __init__(self):
        super().__init__("No repositories are defined in this provider.")


class MalformedUrlError(SourcePathError):
    """The input cannot be parsed as an absolute URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


__all__ = [
    "SourcePathError",
    "MalformedSpecError",
    "UnknownRepositoryError",
    "NoRepositoriesConfiguredError",
    "MalformedUrlError",
]

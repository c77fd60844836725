"""
source_path.py — the source path micro-grammar.

A source path names a repository, a branch and a path inside that
repository's working copy:

    ""                      nothing specified
    "<repo>"                repository only
    "<repo>|<branch>:<path>"
    "<repo>|:<path>"        branch omitted, the default branch applies
    "<repo>|<branch>:"      empty path

Everything before the first `|` is the repository name (it may contain `:`).
After the `|`, a branch is only recognised when a `:` terminates it; without
a `:` the whole remainder is the path.

Public API:
- parse_source_path(spec, provider) -> SourcePath
- format_source_path(source_path) -> str
- build_source_path(repository_name, branch, relative_path) -> str
"""

from __future__ import annotations

from typing import NamedTuple

from gitpath.data.models import SourcePath, SourceControlProvider, find_repository

from .config import DEFAULT_BRANCH
from .errors import MalformedSpecError, NoRepositoriesConfiguredError, UnknownRepositoryError


class _Segments(NamedTuple):
    repository_name: str
    branch: str
    path: str


def _path_segment(spec: str, path: str) -> str:
    # The path is a single line; one trailing "\n" ends the string and is dropped.
    newline = path.find("\n")
    if newline == -1:
        return path
    if newline != len(path) - 1:
        raise MalformedSpecError(spec)
    return path[:-1]


def _split(spec: str) -> _Segments:
    repository_name, bar, rest = spec.partition("|")
    if not bar:
        return _Segments(repository_name, "", "")

    branch, colon, path = rest.partition(":")
    if not colon:
        # "repo|text": no terminator, so `text` is the path, not a branch
        return _Segments(repository_name, "", _path_segment(spec, rest))
    return _Segments(repository_name, branch, _path_segment(spec, path))


def parse_source_path(spec: str | None, provider: SourceControlProvider) -> SourcePath:
    """
    Resolve `spec` against `provider`'s repository catalog.

    An unnamed repository (`"|dev:src"`) resolves to the catalog's first
    entry. Exactly one leading `/` is dropped from the path.

    Raises:
        MalformedSpecError: if `spec` does not match the grammar.
        UnknownRepositoryError: if the named repository is not in the catalog.
        NoRepositoriesConfiguredError: if no name was given and the catalog is empty.
    """
    if not spec:
        return SourcePath()

    segments = _split(spec)
    relative_path = segments.path[1:] if segments.path.startswith("/") else segments.path
    specified_branch = segments.branch or None

    if segments.repository_name:
        repository = find_repository(provider.repositories, segments.repository_name)
        if repository is None:
            raise UnknownRepositoryError(segments.repository_name)
    else:
        if not provider.repositories:
            raise NoRepositoriesConfiguredError()
        repository = provider.repositories[0]

    agent = provider.agent
    return SourcePath(
        specified_branch=specified_branch,
        branch=specified_branch or DEFAULT_BRANCH,
        repository=repository,
        relative_path=relative_path,
        path_on_disk=agent.combine(repository.root_path(agent), relative_path),
    )


def format_source_path(source_path: SourcePath) -> str:
    """Source path string for display or re-parsing; see `SourcePath.__str__`."""
    return str(source_path)


def _strip_first_segment(relative_path: str) -> str:
    # "/repo/src/app" and "repo/src/app" both become "src/app"; a path with
    # no segment after the first one becomes "".
    s = relative_path[1:] if relative_path.startswith("/") else relative_path
    head, slash, rest = s.partition("/")
    if not head or not slash:
        return ""
    return rest


def build_source_path(repository_name: str | None, branch: str | None, relative_path: str | None) -> str:
    """
    Build a source path string from its parts, without any catalog lookup.

    `relative_path` is expected to start with the repository's own directory
    name (as directory listings report it); that first segment is dropped
    because the repository name already identifies it. `None` and `""` differ:
    `None` yields an explicit empty path (`"repo|branch:"`).

    Examples
    --------
    >>> build_source_path("repoA", "dev", "repoA/src/app")
    'repoA|dev:src/app'
    >>> build_source_path("repoA", "", "repoA/src/app")
    'repoA'
    """
    if not repository_name:
        return ""
    if not branch:
        return repository_name
    if relative_path is None:
        return f"{repository_name}|{branch}:"

    return f"{repository_name}|{branch}:{_strip_first_segment(relative_path)}"


__all__ = [
    "parse_source_path",
    "format_source_path",
    "build_source_path",
]

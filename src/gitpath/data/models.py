from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from pydantic import BaseModel


# ── collaborator capabilities ──────────────────────────────────
# Anything with these shapes can resolve a source path. The defaults built
# from the settings file live in `gitpath.config.settings`.

@runtime_checkable
class Agent(Protocol):
    work_dir: str

    def combine(self, base: str, relative: str) -> str:
        """Join `relative` onto `base` using the agent's path rules."""
        ...


@runtime_checkable
class Repository(Protocol):
    name: str

    def root_path(self, agent: Agent) -> str:
        """Absolute root of the repository's working copy on `agent`."""
        ...


@runtime_checkable
class SourceControlProvider(Protocol):
    repositories: Sequence[Repository]
    agent: Agent


# ── catalog lookup ─────────────────────────────────────────────

def find_repository(repositories: Sequence[Repository], name: str) -> Repository | None:
    """Exact, case-sensitive lookup by repository name."""
    for repository in repositories:
        if repository.name == name:
            return repository
    return None


# ── resolved source path ───────────────────────────────────────

class SourcePath(BaseModel):
    """
    A source path resolved against a repository catalog.

    `specified_branch` is what the source path string named (None when it
    named none); `branch` is the branch to actually use. The empty source
    path has every field set to None.
    """

    specified_branch: str | None = None
    branch: str | None = None
    repository: Repository | None = None
    relative_path: str | None = None
    path_on_disk: str | None = None

    model_config = dict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def parse(cls, spec: str | None, provider: SourceControlProvider) -> SourcePath:
        from gitpath.services.git.source_path import parse_source_path

        return parse_source_path(spec, provider)

    @property
    def is_empty(self) -> bool:
        return self.repository is None

    def __str__(self) -> str:
        if self.repository is None:
            return ""
        if self.specified_branch is None:
            return self.repository.name
        return f"{self.repository.name}|{self.specified_branch}:{self.relative_path or ''}"

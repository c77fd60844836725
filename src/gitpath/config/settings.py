from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Literal, Sequence

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from gitpath.data.models import Agent, Repository
from gitpath.services.git.config import CACHE_DIR
from gitpath.services.git.urls import build_path_from_url

logger = logging.getLogger(__name__)

PathFlavour = Literal["posix", "windows"]


class LocalAgent:
    """Joins paths the way the machine holding the working copies does."""

    def __init__(self, work_dir: Path | str = CACHE_DIR, flavour: PathFlavour = "posix"):
        self._path_cls = PureWindowsPath if flavour == "windows" else PurePosixPath
        self.flavour = flavour
        self.work_dir = str(self._path_cls(work_dir))

    def combine(self, base: str, relative: str) -> str:
        relative = relative.lstrip("/\\")
        if not relative:
            return base
        return str(self._path_cls(base) / relative)

    def __repr__(self) -> str:
        return f"LocalAgent(work_dir={self.work_dir!r}, flavour={self.flavour!r})"


class RepositoryConfig(BaseModel):
    """One catalog entry: a named repository and where its working copy lives."""

    name: str = Field(..., min_length=1, description="Name used in source path strings")
    remote_url: str | None = Field(None, description="Remote to check out into the agent's work directory")
    local_path: str | None = Field(None, description="Existing working copy; wins over remote_url")

    model_config = dict(extra="forbid", frozen=True)  # help catch typos

    @field_validator("name")
    @classmethod
    def _no_separator(cls, v: str) -> str:
        if "|" in v:
            raise ValueError(f"Repository name may not contain '|': {v!r}")
        return v

    @model_validator(mode="after")
    def _require_location(self) -> RepositoryConfig:
        if not self.remote_url and not self.local_path:
            raise ValueError(f"Repository {self.name!r} needs a remote_url or a local_path")
        return self

    def root_path(self, agent: Agent) -> str:
        if self.local_path:
            return self.local_path
        return agent.combine(agent.work_dir, build_path_from_url(self.remote_url))


class CatalogProvider:
    """An ordered repository catalog plus the agent that owns the working copies."""

    def __init__(self, repositories: Sequence[Repository], agent: Agent):
        self.repositories = tuple(repositories)
        self.agent = agent


class CatalogSettings(BaseModel):
    """Strongly-typed catalog configuration."""

    work_dir: str = Field(
        default=str(CACHE_DIR),
        description="Directory holding checkouts of repositories configured by remote_url",
    )
    path_flavour: PathFlavour = Field("posix", description="Path joining rules of the agent")
    repositories: tuple[RepositoryConfig, ...] = Field(
        default_factory=tuple,
        description="Known repositories, in lookup order; the first one is the default",
    )

    model_config = dict(extra="forbid", frozen=True)  # read-only, catches typos

    @field_validator("repositories")
    @classmethod
    def _unique_names(cls, v: tuple[RepositoryConfig, ...]) -> tuple[RepositoryConfig, ...]:
        seen: set[str] = set()
        for repository in v:
            if repository.name in seen:
                raise ValueError(f"Duplicate repository name: {repository.name!r}")
            seen.add(repository.name)
        return v


DEFAULT_SETTINGS_PATH: Path = Path("gitpath.yaml")


@lru_cache(maxsize=None)
def get_settings(path: Path | str = DEFAULT_SETTINGS_PATH) -> CatalogSettings:
    """Return a cached :class:`CatalogSettings` instance loaded from *path*.

    Parameters
    ----------
    path:
        Path to the YAML file (defaults to ``gitpath.yaml`` in the working directory).
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as exc:
        raise FileNotFoundError(
            f"Settings file not found at '{path}'. Create it or pass a custom path."
        ) from exc

    settings = CatalogSettings(**data)
    logger.debug("Loaded %d repositories from %s", len(settings.repositories), path)
    return settings


def make_provider(settings: CatalogSettings) -> CatalogProvider:
    """Build the repository catalog and local agent described by *settings*."""
    agent = LocalAgent(settings.work_dir, settings.path_flavour)
    return CatalogProvider(settings.repositories, agent)

"""Tests for the YAML catalog settings and the default collaborators."""

from __future__ import annotations

from textwrap import dedent

import pytest
from pydantic import ValidationError

from gitpath.config.settings import (
    CatalogSettings,
    LocalAgent,
    RepositoryConfig,
    get_settings,
    make_provider,
)
from gitpath.services.git import parse_source_path


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _write(tmp_path, text: str):
    path = tmp_path / "gitpath.yaml"
    path.write_text(dedent(text), encoding="utf-8")
    return path


class TestGetSettings:
    def test_loads_repositories_in_order(self, tmp_path):
        path = _write(tmp_path, """
            work_dir: /var/cache/gitpath
            repositories:
              - name: app
                remote_url: https://host.example/org/app.git
              - name: lib
                local_path: /src/lib
        """)
        settings = get_settings(path)
        assert [r.name for r in settings.repositories] == ["app", "lib"]
        assert settings.work_dir == "/var/cache/gitpath"
        assert settings.path_flavour == "posix"

    def test_result_is_cached_per_path(self, tmp_path):
        path = _write(tmp_path, "repositories: []\n")
        assert get_settings(path) is get_settings(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        settings = get_settings(_write(tmp_path, ""))
        assert settings.repositories == ()

    def test_cached_catalog_is_immutable(self, tmp_path):
        path = _write(tmp_path, """
            repositories:
              - {name: app, local_path: /a}
        """)
        settings = get_settings(path)
        assert isinstance(settings.repositories, tuple)
        with pytest.raises(AttributeError):
            settings.repositories.append(RepositoryConfig(name="lib", local_path="/b"))
        assert [r.name for r in get_settings(path).repositories] == ["app"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Settings file not found"):
            get_settings(tmp_path / "nope.yaml")

    def test_duplicate_names_rejected(self, tmp_path):
        path = _write(tmp_path, """
            repositories:
              - {name: app, local_path: /a}
              - {name: app, local_path: /b}
        """)
        with pytest.raises(ValidationError, match="Duplicate repository name"):
            get_settings(path)

    def test_unknown_keys_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            get_settings(_write(tmp_path, "repos: []\n"))


class TestRepositoryConfig:
    def test_needs_a_location(self):
        with pytest.raises(ValidationError, match="remote_url or a local_path"):
            RepositoryConfig(name="app")

    def test_name_may_not_contain_separator(self):
        with pytest.raises(ValidationError):
            RepositoryConfig(name="a|b", local_path="/a")

    def test_local_path_wins(self):
        repo = RepositoryConfig(name="app", remote_url="https://h.example/app", local_path="/src/app")
        assert repo.root_path(LocalAgent("/work")) == "/src/app"

    def test_remote_root_is_sanitized_url_in_work_dir(self):
        repo = RepositoryConfig(name="app", remote_url="https://u:p@h.example/org/app.git")
        assert repo.root_path(LocalAgent("/work")) == "/work/h.example_org_app.git"


class TestLocalAgent:
    def test_posix_combine(self):
        agent = LocalAgent("/work")
        assert agent.combine("/srv/repo", "src/app") == "/srv/repo/src/app"
        assert agent.combine("/srv/repo", "/src") == "/srv/repo/src"
        assert agent.combine("/srv/repo", "") == "/srv/repo"

    def test_windows_combine(self):
        agent = LocalAgent("C:\\work", flavour="windows")
        assert agent.work_dir == "C:\\work"
        assert agent.combine("C:\\work\\repo", "src/app") == "C:\\work\\repo\\src\\app"


def test_make_provider_resolves_source_paths():
    settings = CatalogSettings(
        work_dir="/work",
        repositories=[
            RepositoryConfig(name="app", remote_url="https://host.example/org/app.git"),
            RepositoryConfig(name="lib", local_path="/src/lib"),
        ],
    )
    provider = make_provider(settings)
    assert [r.name for r in provider.repositories] == ["app", "lib"]

    result = parse_source_path("|dev:docs", provider)
    assert result.repository.name == "app"
    assert result.path_on_disk == "/work/host.example_org_app.git/docs"
    assert parse_source_path("lib", provider).path_on_disk == "/src/lib"

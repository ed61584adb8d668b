"""Unit tests for ffdh.core.settings_loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from ffdh.api.exceptions import SettingsError
from ffdh.constants import ENV_CONFIG_PATH, ENV_DEPLOY_COMMAND
from ffdh.core.settings_loader import SettingsLoader
from ffdh.models import Settings


def test_defaults_without_settings_file(tmp_path: Path) -> None:
    settings = SettingsLoader(tmp_path, environ={}).load()
    assert settings == Settings()
    assert settings.manifest_file == "functions.json"
    assert settings.project_config_file == "firebase.json"
    assert settings.deploy_command == "firebase"
    assert settings.namespace_prefix == "functions"
    assert settings.timeout is None


def test_reads_yaml_file(tmp_path: Path) -> None:
    (tmp_path / ".ffdh.yaml").write_text(
        "manifest_file: deploy.json\nnamespace_prefix: fn\ntimeout: 90\n", encoding="utf-8"
    )

    settings = SettingsLoader(tmp_path, environ={}).load()

    assert settings.manifest_file == "deploy.json"
    assert settings.namespace_prefix == "fn"
    assert settings.timeout == 90.0


def test_empty_yaml_file_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / ".ffdh.yaml").write_text("", encoding="utf-8")
    assert SettingsLoader(tmp_path, environ={}).load() == Settings()


def test_environment_overrides_deploy_command(tmp_path: Path) -> None:
    (tmp_path / ".ffdh.yaml").write_text("deploy_command: firebase\n", encoding="utf-8")

    settings = SettingsLoader(tmp_path, environ={ENV_DEPLOY_COMMAND: "npx-firebase"}).load()

    assert settings.deploy_command == "npx-firebase"


def test_settings_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "ci.yaml").write_text("default_source: src\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = SettingsLoader(tmp_path / "app", environ={ENV_CONFIG_PATH: "ci.yaml"}).load()

    assert settings.default_source == "src"


def test_relative_settings_path_resolves_against_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    project = tmp_path / "app"
    project.mkdir()
    (project / "ci.yaml").write_text("default_source: wrong\n", encoding="utf-8")
    (tmp_path / "ci.yaml").write_text("default_source: src\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    loader = SettingsLoader(project, settings_path="ci.yaml", environ={})

    assert loader.settings_path == Path("ci.yaml")
    assert loader.load().default_source == "src"


def test_default_settings_file_stays_in_project_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    project = tmp_path / "app"
    project.mkdir()
    (project / ".ffdh.yaml").write_text("default_source: src\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert SettingsLoader(project, environ={}).load().default_source == "src"


def test_explicit_settings_file_must_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SettingsError, match="not found"):
        SettingsLoader(tmp_path, settings_path="missing.yaml", environ={}).load()


def test_unknown_keys_are_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / ".ffdh.yaml").write_text("colour: blue\n", encoding="utf-8")

    settings = SettingsLoader(tmp_path, environ={}).load()

    assert settings == Settings()
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "content",
    ["- a\n- b\n", "timeout: -5\n", "timeout: soon\n", "deploy_command: [a, b]\n", "key: [unclosed\n"],
)
def test_invalid_settings_are_rejected(tmp_path: Path, content: str) -> None:
    (tmp_path / ".ffdh.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(SettingsError) as excinfo:
        SettingsLoader(tmp_path, environ={}).load()
    assert excinfo.value.error_code == "FF001"

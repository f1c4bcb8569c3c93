"""Tests for mdfront.toml walk-up discovery."""

from pathlib import Path

import pytest

from mdfront.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[parser]\nbase_dir = "posts"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "articles" / "rust" / "basics"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        child = tmp_path / "empty"
        child.mkdir()
        # A stray mdfront.toml above tmp_path would be found; guard against it.
        found = find_config(child)
        assert found is None or not found.is_relative_to(tmp_path)

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "anywhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None

    def test_nearest_config_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "articles"
        nested.mkdir()
        (nested / CONFIG_FILENAME).write_text("")
        child = nested / "rust"
        child.mkdir()
        assert find_config(child) == nested / CONFIG_FILENAME

    def test_empty_env_var_falls_back_to_search(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, "")
        assert find_config(tmp_path) == config_file

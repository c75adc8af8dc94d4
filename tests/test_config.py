"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from zkday.config import DEFAULT_EDITOR, MissingSettingError, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZETTELKASTEN", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


class TestLoadSettings:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ZETTELKASTEN", str(tmp_path))
        monkeypatch.setenv("EDITOR", "vim")

        settings = load_settings()

        assert settings.base_dir == tmp_path
        assert settings.editor_command == "vim"

    def test_editor_defaults_to_nvim(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("ZETTELKASTEN", str(tmp_path))
        assert load_settings().editor_command == DEFAULT_EDITOR == "nvim"

    def test_empty_editor_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("ZETTELKASTEN", str(tmp_path))
        monkeypatch.setenv("EDITOR", "")
        assert load_settings().editor_command == DEFAULT_EDITOR

    def test_missing_base_dir_raises(self) -> None:
        with pytest.raises(MissingSettingError) as exc_info:
            load_settings()
        assert exc_info.value.env_var == "ZETTELKASTEN"
        assert "ZETTELKASTEN environment variable is not set." in str(exc_info.value)

    def test_empty_base_dir_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZETTELKASTEN", "")
        with pytest.raises(MissingSettingError):
            load_settings()

    def test_base_dir_need_not_exist(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        missing = tmp_path / "not-there"
        monkeypatch.setenv("ZETTELKASTEN", str(missing))

        settings = load_settings()

        assert settings.base_dir == missing
        assert not missing.exists()

    def test_home_is_expanded(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("ZETTELKASTEN", "~/notes")
        assert load_settings().base_dir == tmp_path / "notes"

    def test_relative_base_dir_is_made_absolute(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ZETTELKASTEN", "notes")
        settings = load_settings()
        assert settings.base_dir.is_absolute()
        assert settings.base_dir == Path.cwd() / "notes"


class TestMissingSettingError:
    def test_is_os_error(self) -> None:
        assert issubclass(MissingSettingError, OSError)

    def test_settings_model_requires_base_dir(self) -> None:
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            Settings()

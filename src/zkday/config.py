"""Configuration management for zkday.

Everything comes from the environment; there is no config file.

    ZETTELKASTEN  — notes root (required)
    EDITOR        — editor command (optional, defaults to nvim)

Daily notes live under {ZETTELKASTEN}/periodic-notes/daily-notes/.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EDITOR = "nvim"


class MissingSettingError(OSError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is not set.")


class Settings(BaseSettings):
    """Run configuration, built once at startup and passed explicitly."""

    model_config = SettingsConfigDict(extra="ignore")

    base_dir: Path = Field(
        validation_alias="ZETTELKASTEN",
        description="Root of the Zettelkasten notes directory",
    )
    editor_command: str = Field(
        default=DEFAULT_EDITOR,
        validation_alias="EDITOR",
        description="Editor command used to open the note",
    )

    @field_validator("base_dir", mode="before")
    @classmethod
    def reject_empty_base_dir(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            raise ValueError("ZETTELKASTEN must not be empty")
        return v

    @field_validator("base_dir")
    @classmethod
    def expand_base_dir(cls, v: Path) -> Path:
        # No existence check: a missing notes root fails later as an I/O error
        return v.expanduser().absolute()

    @field_validator("editor_command", mode="before")
    @classmethod
    def default_empty_editor(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return DEFAULT_EDITOR
        return v


def load_settings() -> Settings:
    """Load settings from the environment. Entry point for all config access.

    Raises MissingSettingError if ZETTELKASTEN is unset or empty. Nothing on
    disk is touched.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise MissingSettingError("ZETTELKASTEN") from exc

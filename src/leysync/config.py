"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from leysync.models.export import ExportOptions


def _default_config_dir() -> Path:
    return Path.home() / ".leysync"


class ExportSettings(BaseSettings):
    """Default GOOD export options, overridable per CLI invocation."""

    remove_manekin: bool = False
    add_traveler_element_to_key: bool = False
    min_character_level: int = Field(default=0, ge=0)

    def to_options(self, **overrides: bool | int | None) -> ExportOptions:
        """Build :class:`ExportOptions`, letting non-None *overrides* win."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ExportOptions(**values)


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEYSYNC_",
        env_nested_delimiter="__",
    )

    export: ExportSettings = Field(default_factory=ExportSettings)
    skip_invalid: bool = False
    validate_output: bool = True

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))


def load_config() -> AppConfig:
    """Load application config from env vars and ``~/.leysync/config.toml``."""
    return AppConfig()

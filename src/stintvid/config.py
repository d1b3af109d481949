"""Configuration utilities for stintvid.

Settings are grouped into small Pydantic sections and collected by
:class:`Settings`.  Values can come from ``STINTVID_`` prefixed environment
variables (nested keys separated by ``__``) or from a YAML/JSON file with
matching nested keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.logging import DEFAULT_FORMAT


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


class OutputSettings(SectionModel):
    """Formatting of values printed by the CLI."""

    precision: int = Field(default=3, ge=0)


class LoggingSettings(SectionModel):
    """Logger level and message format."""

    level: str = "WARNING"
    format: str = DEFAULT_FORMAT

    @field_validator("level", mode="before")
    @classmethod
    def _check_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"unknown logging level: {value}")
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="STINTVID_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""

        return cls()


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file.

    ``ValueError`` is raised when the file cannot be parsed and
    ``TypeError`` when it does not hold a mapping.
    """

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {p}: {exc}") from exc
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)

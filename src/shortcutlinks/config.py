"""Configuration loading and validation for shortcutlinks."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from shortcutlinks.adapters.markdown_compiler import ReaderOptions, WriterOptions
from shortcutlinks.core.errors import ConfigError
from shortcutlinks.core.models import NAME_DELIMITERS
from shortcutlinks.shortcuts.templates import validate_template

DEFAULT_CONFIG_PATH = "shortcutlinks.yaml"


class TemplateShortcutConfig(BaseModel):
    """A custom shortcut defined by URL templates."""

    names: list[str] = Field(description="Names the shortcut answers to")
    url: str = Field(description="URL template used without a tag ({text})")
    tag_url: str | None = Field(default=None, description="URL template used with a tag")

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Validate names are non-empty and usable in link targets."""
        if not v:
            raise ValueError("At least one shortcut name is required")
        for name in v:
            if not name or NAME_DELIMITERS.intersection(name) or name.strip() != name:
                raise ValueError(f"Invalid shortcut name: {name!r}")
        return v

    @model_validator(mode="after")
    def validate_templates(self) -> TemplateShortcutConfig:
        """Validate template placeholders."""
        validate_template(self.url, allow_tag=False)
        if self.tag_url is not None:
            validate_template(self.tag_url)
        return self


class ShortcutLinksConfig(BaseModel):
    """Top-level shortcutlinks configuration."""

    use_builtin: bool = Field(default=True, description="Append the built-in catalog")
    shortcuts: list[TemplateShortcutConfig] = Field(default_factory=list)
    reader: ReaderOptions = Field(default_factory=ReaderOptions)
    writer: WriterOptions = Field(default_factory=WriterOptions)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v!r}")
        return level


def load_config(path: str | None = None) -> ShortcutLinksConfig:
    """Load and validate configuration from a YAML file.

    Environment variable overrides:
        SHORTCUTLINKS_LOG_LEVEL: overrides log_level

    Args:
        path: Path to config file. Defaults to ./shortcutlinks.yaml, which
            may be absent (defaults are used then).

    Returns:
        Validated ShortcutLinksConfig.

    Raises:
        ConfigError: If config file is missing, unreadable, or invalid.
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        data: dict = {}
    else:
        try:
            raw = config_path.read_text()
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e

        # An empty file loads as None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a YAML mapping")

    env_level = os.environ.get("SHORTCUTLINKS_LOG_LEVEL")
    if env_level:
        data["log_level"] = env_level

    try:
        return ShortcutLinksConfig(**data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

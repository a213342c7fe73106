"""
Configuration management for MedRec.

Loads/saves TOML configuration for logging, suggestions and the terminal UI.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_dir: str = Field(default="~/medrec_logs", description="Directory for log files")
    log_to_file: bool = Field(default=True, description="Write logs to a timestamped file")


class SuggestionConfig(BaseModel):
    """Unknown-command suggestion configuration."""

    max_suggestions: int = Field(
        default=5, ge=1, description="Cap on suggestions for multi-word command words"
    )


class UiConfig(BaseModel):
    """Terminal UI configuration."""

    title: str = Field(default="MedRec", description="Window title")
    show_help_on_start: bool = Field(default=False, description="Show help text at startup")


class Config(BaseModel):
    """Complete MedRec configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    suggestions: SuggestionConfig = Field(default_factory=SuggestionConfig)
    ui: UiConfig = Field(default_factory=UiConfig)


def get_config_path() -> Path:
    """Get default configuration file path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "medrec" / "config.toml"


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        path: Configuration file path. If None, uses default location.

    Returns:
        Loaded configuration object.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        # Return default config if file doesn't exist
        return Config()

    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    return Config(**data)


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """
    Save configuration to TOML file.

    Args:
        config: Configuration object to save.
        path: Configuration file path. If None, uses default location.
    """
    if path is None:
        path = get_config_path()

    # Create directory if it doesn't exist
    path.parent.mkdir(parents=True, exist_ok=True)

    import tomli_w

    with open(path, "wb") as f:
        tomli_w.dump(config.model_dump(), f)

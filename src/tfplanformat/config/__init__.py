"""Configuration module: load and validate formatting settings."""

import logging
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config, read_config_file, _deep_merge
from .paths import get_defaults_path, get_user_config_path, get_project_config_path

logger = get_logger("config")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FormatConfig(BaseModel):
    """Validated formatting settings."""
    engine: str = Field(default="jinja2", description="Template engine for the custom command")
    hide_unchanged: bool = Field(default=False, description="Drop lines for unchanged attributes")
    full_depth: bool = Field(default=False, description="Expand unchanged nested values leaf by leaf")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return value

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_format_config(config_path: Optional[str] = None) -> FormatConfig:
    """
    Load formatting settings.
    
    Packaged defaults are overridden by the user config, then the project
    config, then ``config_path`` when given.
    
    Args:
        config_path: Explicit config YAML file (optional)
        
    Returns:
        FormatConfig
        
    Raises:
        ConfigError: If any config file is invalid
    """
    config = load_config()
    
    if config_path is not None:
        _deep_merge(config, read_config_file(Path(config_path)))
        logger.info(f"Loaded configuration from {config_path}")
    
    try:
        return FormatConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
    except TypeError as e:
        raise ConfigError(f"Invalid configuration: {e}")


__all__ = [
    "FormatConfig",
    "load_format_config",
    "load_config",
    "get_defaults_path",
    "get_user_config_path",
    "get_project_config_path",
]

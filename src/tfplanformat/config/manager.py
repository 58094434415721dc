"""Two-tier configuration manager (user + project override)."""

import yaml
from pathlib import Path
from typing import Dict, Any
from .paths import get_defaults_path, get_user_config_path, get_project_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read one YAML config file.
    
    Args:
        path: Config file path
        
    Returns:
        Configuration dictionary (empty for an empty file)
        
    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def load_config() -> Dict[str, Any]:
    """
    Load the full config tree: packaged defaults, then user, then project.
    
    Returns:
        Configuration dictionary (later tiers override earlier ones)
    """
    config = read_config_file(get_defaults_path())
    
    user_config_path = get_user_config_path()
    if user_config_path.exists():
        _deep_merge(config, read_config_file(user_config_path))
        logger.info(f"Loaded user config from {user_config_path}")
    
    project_config_path = get_project_config_path()
    if project_config_path:
        _deep_merge(config, read_config_file(project_config_path))
        logger.info(f"Loaded project config from {project_config_path}")
    
    return config


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value

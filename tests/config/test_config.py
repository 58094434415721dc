"""Tests for configuration loading."""

import logging
from pathlib import Path
import pytest
from tfplanformat.config import FormatConfig, load_format_config, get_user_config_path, get_project_config_path
from tfplanformat.config.manager import read_config_file
from tfplanformat.utils.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


class TestDefaults:
    """Test packaged defaults."""
    
    def test_defaults(self):
        config = load_format_config()
        assert config == FormatConfig()
        assert config.engine == "jinja2"
        assert config.hide_unchanged is False
        assert config.full_depth is False
        assert config.log_level_number == logging.WARNING
    
    def test_no_project_config(self):
        assert get_project_config_path() is None


class TestOverrides:
    """Test config tiers."""
    
    def test_user_config(self):
        _write(get_user_config_path(), "hide_unchanged: true\n")
        assert load_format_config().hide_unchanged is True
    
    def test_project_overrides_user(self, tmp_path):
        _write(get_user_config_path(), "log_level: error\nfull_depth: true\n")
        _write(tmp_path / ".tfplanformat" / "config.yaml", "log_level: debug\n")
        
        config = load_format_config()
        assert config.log_level == "DEBUG"
        assert config.full_depth is True
    
    def test_explicit_file_wins(self, tmp_path):
        _write(tmp_path / ".tfplanformat" / "config.yaml", "hide_unchanged: true\n")
        explicit = _write(tmp_path / "ci.yaml", "hide_unchanged: false\n")
        assert load_format_config(str(explicit)).hide_unchanged is False
    
    def test_empty_file_is_allowed(self, tmp_path):
        explicit = _write(tmp_path / "empty.yaml", "")
        assert load_format_config(str(explicit)) == FormatConfig()


class TestInvalidConfig:
    """Test config errors."""
    
    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path / "bad.yaml", "engine: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_format_config(str(path))
    
    def test_not_a_mapping(self, tmp_path):
        path = _write(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            read_config_file(path)
    
    def test_unknown_log_level(self, tmp_path):
        path = _write(tmp_path / "level.yaml", "log_level: chatty\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_format_config(str(path))
    
    def test_wrong_type(self, tmp_path):
        path = _write(tmp_path / "type.yaml", "hide_unchanged: [1, 2]\n")
        with pytest.raises(ConfigError):
            load_format_config(str(path))
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            read_config_file(tmp_path / "nope.yaml")

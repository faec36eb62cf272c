"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from models.config import SECTION_MODELS, DiffSettings, ExportSettings


def validate_section(section: str, values: Any) -> dict[str, Any]:
    """Check a typed config section, raising ValidationError when it is invalid"""
    return SECTION_MODELS[section].model_validate(values).model_dump()


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1st: environment variable
            config_dir = os.environ.get("PIXORA_DIFF_CONFIG_DIR")

            # 2nd: home directory ~/.pixora_diff
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.pixora_diff")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # 3rd: temp directory when nothing else is writable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "pixora_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "pixora_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return config

        for key, value in stored.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value

        defaults = self._default_config()
        for section in SECTION_MODELS:
            try:
                config[section] = validate_section(section, config[section])
            except ValidationError as e:
                print(f"[ConfigManager] Invalid '{section}' settings, using defaults: {e.error_count()} error(s)")
                config[section] = defaults[section]
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": DiffSettings().model_dump(),
            "export": ExportSettings().model_dump(),
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return {
            key: value.copy() if isinstance(value, dict) else value
            for key, value in self._config.items()
        }

    def save_config(self, config: dict[str, Any]):
        """Validate and save configuration to file"""
        for section in SECTION_MODELS:
            if section in config:
                config[section] = validate_section(section, config[section])
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

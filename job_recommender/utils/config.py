"""
Configuration management for Job Recommender.

Settings are read from three layers, highest precedence first:
environment variables, the JSON config file, then DEFAULT_CONFIG.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import logging
import os


def merge_settings(defaults: dict, overrides: dict) -> dict:
    """Return defaults with overrides layered on top, section by section."""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


def flatten_settings(settings: dict, prefix: str = "") -> dict:
    """Flatten nested sections into dot-notation keys."""
    flat = {}
    for key, value in settings.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_settings(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def parse_value(raw: str):
    """Interpret a command-line value as JSON where possible (numbers, booleans, null)."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


class Config:
    """Layered application configuration."""

    DEFAULT_CONFIG = {
        "recommendation": {
            "default_limit": 5,
            "max_limit": 10,
        },
        "search": {
            "default_radius_km": 25.0,
        },
        "data": {
            "store_path": None,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    ENV_OVERRIDES = {
        "data.store_path": "JOB_RECOMMENDER_STORE_PATH",
        "logging.level": "JOB_RECOMMENDER_LOG_LEVEL",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.job_recommender/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".job_recommender" / "config.json"

        self.config = merge_settings(self.DEFAULT_CONFIG, self._read_file())

    def _read_file(self) -> dict:
        if not self.config_path.exists():
            return {}

        with open(self.config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.config_path} must hold a JSON object")
        return data

    def save(self) -> Path:
        """Write the file and default layers (not environment overrides) to disk."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)
        return self.config_path

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "recommendation.max_limit")
            default: Returned when the key is not set in any layer

        Returns:
            The environment override if one is set, else the configured value
        """
        env_value = os.environ.get(self.ENV_OVERRIDES.get(key, ""))
        if env_value:
            return env_value

        section, _, leaf = key.rpartition('.')
        parent = self._section(section, create=False)
        if parent is None or leaf not in parent:
            return default
        return parent[leaf]

    def set(self, key: str, value) -> None:
        """
        Set a configuration value using dot notation, creating sections as needed.

        Raises:
            KeyError: if the key names a whole section, or passes through a plain value
        """
        section, _, leaf = key.rpartition('.')
        parent = self._section(section, create=True)
        if parent is None or isinstance(parent.get(leaf), dict):
            raise KeyError(f"Cannot set {key!r}: it is a section or lies under a plain value")
        parent[leaf] = value

    def _section(self, dotted: str, create: bool) -> Optional[dict]:
        node = self.config
        for name in filter(None, dotted.split('.')):
            if name not in node and create:
                node[name] = {}
            node = node.get(name)
            if not isinstance(node, dict):
                return None
        return node

    def effective(self) -> dict:
        """Flat dot-notation view of every setting with environment overrides applied."""
        return {key: self.get(key) for key in flatten_settings(self.config)}

    def overridden_keys(self) -> list[str]:
        return [key for key, var in self.ENV_OVERRIDES.items() if os.environ.get(var)]

    def get_store_path(self) -> Optional[str]:
        """Get the engine store file, if one is configured."""
        return self.get("data.store_path")

    def get_log_level(self) -> str:
        """
        Get the configured logging level name.

        Raises:
            ValueError: if the name is not a standard logging level
        """
        level = str(self.get("logging.level", "WARNING")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {level!r}")
        return level

    def clamp_limit(self, limit: Optional[int]) -> int:
        """Apply the configured default and bound a result limit to 1..max_limit."""
        if limit is None:
            limit = self.get("recommendation.default_limit", 5)
        max_limit = self.get("recommendation.max_limit", 10)
        return min(max_limit, max(1, limit))

    @classmethod
    def create_default_config(cls, path: str = None) -> 'Config':
        """Create a new config file with default values."""
        config = cls(path)
        config.config = copy.deepcopy(cls.DEFAULT_CONFIG)
        config.save()
        return config

"""
Configuration loader for memplot runs.

Reads sampling and chart defaults from a ``config.yaml`` inside a
directory, with optional environment overrides from ``config_<env>.yaml``.
"""
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from memplot.config.memplot_config import MemplotConfig
from memplot.errors import ConfigurationError

_FIELD_TYPES = {
    'interval': float,
    'duration': float,
    'plot_rss': bool,
    'plot_vsz': bool,
    'width': float,
    'height': float,
    'dpi': int,
    'output': str,
}


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: Optional[str] = None):
        self.config_path = config_path
        self.env = env
        self.config = self._load_config()

    def _read_yaml(self, config_file: Path) -> Dict[str, Any]:
        with open(config_file, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_file} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_config(self) -> MemplotConfig:
        """
        Load configuration from YAML files.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            MemplotConfig: defaults updated with the values found on disk
        """
        config = MemplotConfig()
        if self.config_path is None:
            return config

        data = self._read_yaml(self.config_path / "config.yaml")

        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            # dict.update() overwrites keys from the base file
            data.update(self._read_yaml(env_config_file))

        known = {f.name for f in fields(MemplotConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in data.items():
            setattr(config, key, self._coerce(key, value))

        return config

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        if value is None:
            return None if key == 'output' else getattr(MemplotConfig, key)
        expected = _FIELD_TYPES[key]
        if expected is bool:
            if not isinstance(value, bool):
                raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")
            return value
        if expected in (int, float) and isinstance(value, bool):
            raise ConfigurationError(f"'{key}' must be a number, got {value!r}")
        try:
            return expected(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"'{key}' must be {expected.__name__}, got {value!r}") from e

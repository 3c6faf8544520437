"""Configuration loader for the answer evaluation engine.

Provides access to the cue lexicon and the scorer thresholds. The shipped
``evaluation_config.yaml`` is used unless a path is given explicitly or
through the ``INTERVIEW_EVAL_CONFIG`` environment variable.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml
from pydantic import ValidationError

from interview_eval.config.lexicon import CueLexicon
from interview_eval.utils.error_handler import ConfigError

logger = structlog.get_logger(__name__)

CONFIG_FILE = Path(__file__).parent / "evaluation_config.yaml"
CONFIG_ENV_VAR = "INTERVIEW_EVAL_CONFIG"


def resolve_config_path(path: Optional[str | Path] = None) -> Path:
    """Pick the config file: explicit path, then environment, then default."""
    if path:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_FILE


class ConfigLoader:
    """Loads and provides access to evaluation configuration."""

    def __init__(self, path: Optional[str | Path] = None):
        self.path = resolve_config_path(path)
        self._config: Optional[dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.path.exists():
            if self.path == CONFIG_FILE:
                logger.warning("config_file_not_found", path=str(self.path))
                self._config = {}
                return
            raise ConfigError(str(self.path), "file does not exist")

        try:
            with open(self.path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(str(self.path), str(e)) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(str(self.path), "top-level YAML value must be a mapping")

        self._config = loaded
        logger.info("config_loaded", path=str(self.path))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Examples:
            config.get("clarity.baseline")
            config.get("lexicon.fillers")
            config.get("nonexistent.key", default=100)
        """
        if not self._config:
            return default

        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get entire configuration section."""
        value = self.get(section, default={})
        return value if isinstance(value, dict) else {}

    def lexicon(self) -> CueLexicon:
        """Build the cue lexicon from the ``lexicon`` section."""
        try:
            return CueLexicon(**self.get_section("lexicon"))
        except ValidationError as e:
            raise ConfigError(str(self.path), str(e)) from e

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = None
        self._load_config()


@lru_cache(maxsize=8)
def _cached_loader(path: str) -> ConfigLoader:
    return ConfigLoader(path)


def get_config(path: Optional[str | Path] = None) -> ConfigLoader:
    """Get a shared loader for the resolved config path."""
    return _cached_loader(str(resolve_config_path(path)))


def get_summary_max_items(path: Optional[str | Path] = None) -> int:
    """Get the cap applied to session strengths/improvements."""
    return int(get_config(path).get("summary.max_items", 5))

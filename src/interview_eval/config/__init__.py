"""Configuration: YAML loader and cue lexicon."""
from interview_eval.config.lexicon import CueLexicon
from interview_eval.config.loader import (
    CONFIG_ENV_VAR,
    CONFIG_FILE,
    ConfigLoader,
    get_config,
    get_summary_max_items,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE",
    "ConfigLoader",
    "CueLexicon",
    "get_config",
    "get_summary_max_items",
]

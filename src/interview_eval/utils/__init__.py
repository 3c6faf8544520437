"""Shared utilities: error taxonomy, logging setup and numeric helpers."""
from interview_eval.utils.error_handler import (
    ConfigError,
    EmptyInputError,
    EvaluationError,
    InvalidInputError,
    ProviderError,
    exit_with_error,
)
from interview_eval.utils.log_config import configure_logging
from interview_eval.utils.rounding import clamp, clamp_score, round_half_up

__all__ = [
    "ConfigError",
    "EmptyInputError",
    "EvaluationError",
    "InvalidInputError",
    "ProviderError",
    "exit_with_error",
    "configure_logging",
    "clamp",
    "clamp_score",
    "round_half_up",
]

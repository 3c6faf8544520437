"""Error taxonomy for answer evaluation with user-friendly messages."""
from __future__ import annotations

import sys

import structlog

logger = structlog.get_logger(__name__)


class EvaluationError(Exception):
    """Base class for evaluation errors with user-friendly messaging."""

    def __init__(self, error_type: str, message: str, details: str = ""):
        self.error_type = error_type
        self.message = message
        self.details = details
        super().__init__(self.message)

    def get_user_message(self) -> str:
        """Return a user-friendly error message."""
        msg = f"\nError: {self.message}"
        if self.details:
            msg += f"\n   Details: {self.details}"
        return msg


class InvalidInputError(EvaluationError):
    """Answer text (or another evaluation argument) has the wrong shape."""

    def __init__(self, details: str = ""):
        super().__init__(
            error_type="INVALID_INPUT",
            message="Answer text is required and must be a string",
            details=details,
        )


class EmptyInputError(EvaluationError):
    """Session summary requested over zero evaluations."""

    def __init__(self, details: str = ""):
        super().__init__(
            error_type="EMPTY_AGGREGATE_INPUT",
            message="Cannot summarize a session with no evaluations",
            details=details or "At least one evaluation is required",
        )


class ProviderError(EvaluationError):
    """Lexical/sentiment provider failed or is unavailable.

    Never escapes the scoring core: callers convert it into a neutral or
    fallback result.
    """

    def __init__(self, provider: str, details: str = ""):
        self.provider = provider
        super().__init__(
            error_type="PROVIDER_FAILURE",
            message=f"Lexical provider '{provider}' failed",
            details=details[:200],
        )


class ConfigError(EvaluationError):
    """Evaluation config could not be read or validated."""

    def __init__(self, path: str, details: str = ""):
        super().__init__(
            error_type="CONFIG_INVALID",
            message=f"Could not load evaluation config from {path}",
            details=details[:200],
        )


def exit_with_error(error: EvaluationError, context: str = "") -> int:
    """Log error and exit gracefully with user-friendly message."""
    logger.error(
        "evaluation_failed",
        error_type=error.error_type,
        message=error.message,
        details=error.details,
        context=context,
    )

    print(error.get_user_message(), file=sys.stderr)

    print("\nNext steps:", file=sys.stderr)
    if isinstance(error, ConfigError):
        print("   1. Check the --config path or INTERVIEW_EVAL_CONFIG", file=sys.stderr)
        print("   2. Validate the YAML against the shipped evaluation_config.yaml", file=sys.stderr)
    elif isinstance(error, EmptyInputError):
        print("   1. Provide at least one answer in the batch input", file=sys.stderr)
    else:
        print("   1. Check the answer text and keyword arguments", file=sys.stderr)
        print("   2. Run the same command again", file=sys.stderr)

    print("", file=sys.stderr)
    return 1

"""Base exception class for all safety-eval-specific errors."""


class SafetyEvalError(Exception):
    """Base class for all safety-eval errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

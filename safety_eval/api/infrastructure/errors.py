"""Error types raised by the HTTP layer."""

from safety_eval.core.errors import SafetyEvalError

MISSING_HEADER = "Missing Authorization header"
INVALID_TOKEN = "Invalid authorization token"


class AuthenticationError(SafetyEvalError):
    """Raised when a request lacks a valid bearer token.

    The message is returned to the client verbatim.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

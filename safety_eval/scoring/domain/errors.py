"""Error types raised by the scoring domain."""

from safety_eval.core.errors import SafetyEvalError


class MalformedPayloadError(SafetyEvalError):
    """Raised when a structured golden or prediction payload is not a JSON object.

    Recovered by the evaluation service and reported as a score-0 result.
    """

    def __init__(self, side: str, reason: str) -> None:
        self.side = side
        super().__init__(f"Failed to decode {side} payload: {reason}")

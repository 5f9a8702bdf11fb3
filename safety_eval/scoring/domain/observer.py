"""ScoringObserver port — domain events emitted while scoring a request."""

from typing import Protocol


class ScoringObserver(Protocol):
    """Observer port for scoring events.

    Implementations may log to structlog or record for tests.
    """

    def scoring_started(self, mode: str, model_name: str) -> None: ...

    def scoring_completed(
        self, mode: str, model_name: str, score: float, duration_ms: int
    ) -> None: ...

    def scoring_payload_malformed(self, mode: str, side: str, reason: str) -> None: ...

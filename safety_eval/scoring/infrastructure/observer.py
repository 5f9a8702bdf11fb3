"""Structlog implementation of the ScoringObserver port."""

import structlog


class StructlogScoringObserver:
    """Delegates scoring events to structlog.

    Satisfies the ScoringObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scoring_started(self, mode: str, model_name: str) -> None:
        self._log.debug("scoring.started", mode=mode, model_name=model_name)

    def scoring_completed(
        self, mode: str, model_name: str, score: float, duration_ms: int
    ) -> None:
        self._log.info(
            "scoring.completed",
            mode=mode,
            model_name=model_name,
            score=score,
            duration_ms=duration_ms,
        )

    def scoring_payload_malformed(self, mode: str, side: str, reason: str) -> None:
        self._log.warning(
            "scoring.payload_malformed",
            mode=mode,
            side=side,
            reason=reason,
        )

"""EvaluationService — scores validated requests and reports to an observer."""

import time

from safety_eval.scoring.domain.errors import MalformedPayloadError
from safety_eval.scoring.domain.observer import ScoringObserver
from safety_eval.scoring.domain.request import (
    EvaluationRequest,
    JsonEvaluationRequest,
)
from safety_eval.scoring.domain.result import EvaluationResult, ScoringMode
from safety_eval.scoring.domain.structured_scorer import score_structured
from safety_eval.scoring.domain.text_scorer import score_text

JSON_MODE = "json"


class EvaluationService:
    """Entry point shared by the HTTP routes and the CLI.

    Holds no per-request state; one instance serves any number of concurrent
    requests.
    """

    def __init__(self, observer: ScoringObserver) -> None:
        self._observer = observer

    def evaluate(
        self, request: EvaluationRequest, mode: ScoringMode
    ) -> EvaluationResult:
        """Score a free-text prediction against the datapoint's assistant turn."""
        self._observer.scoring_started(mode=mode.value, model_name=request.model_name)
        start = time.monotonic()

        result = score_text(
            golden=request.datapoint.golden,
            prediction=request.prediction,
            mode=mode,
        )

        self._completed(
            mode=mode.value, model_name=request.model_name, result=result, start=start
        )
        return result

    def evaluate_json(self, request: JsonEvaluationRequest) -> EvaluationResult:
        """Score a JSON safety record against the datapoint's last message."""
        self._observer.scoring_started(mode=JSON_MODE, model_name=request.model_name)
        start = time.monotonic()

        def _report_malformed(exc: MalformedPayloadError) -> None:
            self._observer.scoring_payload_malformed(
                mode=JSON_MODE, side=exc.side, reason=str(exc)
            )

        result = score_structured(
            golden=request.datapoint.golden,
            prediction=request.prediction,
            on_malformed=_report_malformed,
        )

        self._completed(
            mode=JSON_MODE, model_name=request.model_name, result=result, start=start
        )
        return result

    def _completed(
        self, mode: str, model_name: str, result: EvaluationResult, start: float
    ) -> None:
        duration_ms = int((time.monotonic() - start) * 1000)
        self._observer.scoring_completed(
            mode=mode,
            model_name=model_name,
            score=result.score,
            duration_ms=duration_ms,
        )

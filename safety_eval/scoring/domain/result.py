"""EvaluationResult and ScoringMode — the scoring domain's output types."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

ALLOWED_SCORES: frozenset[float] = frozenset({0.0, 0.2, 0.5, 1.0})


class ScoringMode(StrEnum):
    """Rule ladder applied by the free-text scorer."""

    STRICT = "strict"
    LENIENT = "lenient"


class EvaluationResult(BaseModel):
    """Immutable score plus the reason naming the rule that produced it.

    Serialised verbatim as the HTTP response body.
    """

    model_config = ConfigDict(frozen=True)

    score: float
    reason: str

    @field_validator("score")
    @classmethod
    def _score_is_allowed(cls, value: float) -> float:
        if value not in ALLOWED_SCORES:
            allowed = ", ".join(str(s) for s in sorted(ALLOWED_SCORES))
            raise ValueError(f"score must be one of {allowed}, got {value}")
        return value

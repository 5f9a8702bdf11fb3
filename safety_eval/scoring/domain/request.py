"""Request models — the validated input handed to the scorers."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

type Role = Literal["system", "user", "assistant"]

_FIXED_ROLE_ORDER: tuple[Role, ...] = ("system", "user", "assistant")


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Datapoint(BaseModel):
    """Exactly three messages: system, user, assistant. The assistant turn is golden."""

    model_config = ConfigDict(frozen=True)

    messages: list[Message]

    @model_validator(mode="after")
    def _check_fixed_roles(self) -> "Datapoint":
        roles = tuple(message.role for message in self.messages)
        if roles != _FIXED_ROLE_ORDER:
            raise ValueError(
                "messages must be exactly [system, user, assistant], "
                f"got [{', '.join(roles)}]"
            )
        return self

    @property
    def golden(self) -> str:
        return self.messages[2].content


class EvaluationRequest(BaseModel):
    """Body of the free-text evaluation routes."""

    model_config = ConfigDict(frozen=True)

    datapoint: Datapoint
    prediction: str
    # Accepted for forward compatibility; scoring never reads it.
    model_name: str


class JsonMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str | dict[str, Any]


class JsonDatapoint(BaseModel):
    """Any number of messages; the last one carries the golden safety record."""

    model_config = ConfigDict(frozen=True)

    messages: list[JsonMessage] = Field(min_length=1)

    @property
    def golden(self) -> str | dict[str, Any]:
        return self.messages[-1].content


class JsonEvaluationRequest(BaseModel):
    """Body of the structured evaluation route."""

    model_config = ConfigDict(frozen=True)

    datapoint: JsonDatapoint
    prediction: str
    model_name: str

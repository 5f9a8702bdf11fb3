"""Tests for the request models handed to the scorers."""

from typing import Any

import pytest
from pydantic import ValidationError

from safety_eval.scoring.domain.request import (
    EvaluationRequest,
    JsonEvaluationRequest,
)


def _messages(*roles: str) -> list[dict[str, Any]]:
    return [{"role": role, "content": f"{role} text"} for role in roles]


def _body(messages: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "datapoint": {"messages": messages},
        "prediction": "safe",
        "model_name": "test-model",
    }


class TestEvaluationRequest:
    def test_golden_is_the_assistant_message(self) -> None:
        request = EvaluationRequest.model_validate(
            _body(_messages("system", "user", "assistant"))
        )

        assert request.datapoint.golden == "assistant text"

    def test_model_name_is_required(self) -> None:
        body = _body(_messages("system", "user", "assistant"))
        del body["model_name"]

        with pytest.raises(ValidationError):
            EvaluationRequest.model_validate(body)

    def test_two_messages_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationRequest.model_validate(_body(_messages("system", "user")))

    def test_four_messages_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationRequest.model_validate(
                _body(_messages("system", "user", "assistant", "user"))
            )

    def test_wrong_role_order_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="system, user, assistant"):
            EvaluationRequest.model_validate(
                _body(_messages("user", "system", "assistant"))
            )

    def test_unknown_role_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationRequest.model_validate(
                _body(_messages("system", "tool", "assistant"))
            )

    def test_object_content_is_rejected(self) -> None:
        messages = _messages("system", "user", "assistant")
        messages[2]["content"] = {"User Safety": "safe"}

        with pytest.raises(ValidationError):
            EvaluationRequest.model_validate(_body(messages))


class TestJsonEvaluationRequest:
    def test_golden_is_the_last_message(self) -> None:
        request = JsonEvaluationRequest.model_validate(
            _body(_messages("user", "assistant", "user", "assistant"))
        )

        assert request.datapoint.golden == "assistant text"

    def test_single_message_is_accepted(self) -> None:
        request = JsonEvaluationRequest.model_validate(_body(_messages("assistant")))

        assert len(request.datapoint.messages) == 1

    def test_empty_messages_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JsonEvaluationRequest.model_validate(_body([]))

    def test_object_content_is_kept_as_is(self) -> None:
        messages = _messages("user", "assistant")
        messages[-1]["content"] = {"User Safety": "unsafe"}

        request = JsonEvaluationRequest.model_validate(_body(messages))

        assert request.datapoint.golden == {"User Safety": "unsafe"}

"""Shared-secret bearer token check, used as a FastAPI dependency."""

import secrets

from fastapi import Request

from safety_eval.api.infrastructure.errors import (
    INVALID_TOKEN,
    MISSING_HEADER,
    AuthenticationError,
)

_BEARER_PREFIX = "Bearer "


def extract_token(authorization: str) -> str:
    """Strip a leading ``Bearer `` from the header value, if present."""
    return authorization.removeprefix(_BEARER_PREFIX)


def check_bearer_token(authorization: str | None, expected_token: str) -> None:
    """
    Raises:
        AuthenticationError: if the header is absent or its token differs
            from *expected_token*.
    """
    if not authorization:
        raise AuthenticationError(MISSING_HEADER)

    token = extract_token(authorization)
    if not secrets.compare_digest(token.encode(), expected_token.encode()):
        raise AuthenticationError(INVALID_TOKEN)


async def require_bearer_token(request: Request) -> None:
    """Reject the request unless it carries the configured API token."""
    check_bearer_token(
        authorization=request.headers.get("Authorization"),
        expected_token=request.app.state.config.api_token,
    )

"""ServiceConfig — process-wide settings injected into the app at startup."""

from pydantic import BaseModel, Field

WILDCARD_ORIGIN = "*"


class ServiceConfig(BaseModel, frozen=True):
    """Root configuration for the scoring service.

    ``api_token`` is the shared secret every evaluation request must present
    as a bearer token.
    """

    api_token: str = Field(min_length=1)
    host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=3001, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: [WILDCARD_ORIGIN])

"""ApiObserver port and its structlog implementation."""

from typing import Protocol

import structlog


class ApiObserver(Protocol):
    """Observer port for HTTP-layer events that happen before scoring runs."""

    def request_unauthorized(self, path: str, reason: str) -> None: ...

    def request_invalid(self, path: str, error_count: int) -> None: ...


class StructlogApiObserver:
    """Delegates HTTP-layer events to structlog.

    Satisfies the ApiObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def request_unauthorized(self, path: str, reason: str) -> None:
        self._log.warning("api.request_unauthorized", path=path, reason=reason)

    def request_invalid(self, path: str, error_count: int) -> None:
        self._log.warning("api.request_invalid", path=path, error_count=error_count)

"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, source: str, host: str, port: int) -> None:
        self._log.info("config.loaded", source=source, host=host, port=port)

    def config_cors_wildcard_warning(self) -> None:
        self._log.warning(
            "config.cors_wildcard_warning",
            message="CORS allows any origin; restrict cors_origins outside development",
        )

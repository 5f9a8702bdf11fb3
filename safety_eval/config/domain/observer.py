"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, source: str, host: str, port: int) -> None: ...

    def config_cors_wildcard_warning(self) -> None: ...

"""Config loaders — a YAML file with ${VAR} references, or the bare environment."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from safety_eval.config.domain.observer import ConfigObserver
from safety_eval.config.domain.service import WILDCARD_ORIGIN, ServiceConfig
from safety_eval.config.infrastructure.errors import (
    ENVIRONMENT_SOURCE,
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

API_TOKEN_VAR = "API_TOKEN"
HOST_VAR = "HOST"
PORT_VAR = "PORT"

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class YamlConfigLoader:
    """Reads a ServiceConfig from YAML, expanding ``${VAR}`` references from the environment.

    Typical file::

        api_token: ${API_TOKEN}
        port: 3001
        cors_origins: ["https://eval.example.com"]
    """

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ServiceConfig:
        """
        Raises:
            ConfigLoadError: if the file is missing, unreadable or not valid YAML.
            MissingEnvVarsError: if any referenced variable is unset (all are listed).
            ConfigValidationError: if the values violate the ServiceConfig schema.
        """
        source = str(path)
        raw = _read_yaml(path=path)
        expanded = _expand_env_refs(raw=raw, source=source)
        cfg = _validate(raw=expanded, source=source)
        _report(cfg=cfg, source=source, observer=self._observer)
        return cfg


def load_config_from_env(observer: ConfigObserver) -> ServiceConfig:
    """
    Build a ServiceConfig from API_TOKEN, HOST and PORT.

    Raises:
        MissingEnvVarsError: if API_TOKEN is not set.
        ConfigValidationError: if HOST or PORT hold invalid values.
    """
    if API_TOKEN_VAR not in os.environ:
        raise MissingEnvVarsError(ENVIRONMENT_SOURCE, [API_TOKEN_VAR])

    fields = {"api_token": API_TOKEN_VAR, "host": HOST_VAR, "port": PORT_VAR}
    raw = {field: os.environ[var] for field, var in fields.items() if var in os.environ}

    cfg = _validate(raw=raw, source=ENVIRONMENT_SOURCE)
    _report(cfg=cfg, source=ENVIRONMENT_SOURCE, observer=observer)
    return cfg


def _read_yaml(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigLoadError(str(path), "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(str(path), f"unreadable file ({exc})") from exc

    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigLoadError(str(path), "invalid YAML") from exc


def _expand_env_refs(raw: Any, source: str) -> Any:
    """Replace ``${VAR}`` in every string of *raw* in a single walk.

    Unset variables are collected during the same walk and reported together.
    """
    missing: list[str] = []

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in os.environ:
            return os.environ[name]
        if name not in missing:
            missing.append(name)
        return match.group(0)

    def _walk(value: Any) -> Any:
        if isinstance(value, str):
            return _ENV_REF.sub(_lookup, value)
        if isinstance(value, list):
            return [_walk(item) for item in value]
        if isinstance(value, dict):
            return {key: _walk(item) for key, item in value.items()}
        return value

    expanded = _walk(raw)
    if missing:
        raise MissingEnvVarsError(source, missing)
    return expanded


def _validate(raw: Any, source: str) -> ServiceConfig:
    try:
        return ServiceConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(source, exc) from exc


def _report(cfg: ServiceConfig, source: str, observer: ConfigObserver) -> None:
    if WILDCARD_ORIGIN in cfg.cors_origins:
        observer.config_cors_wildcard_warning()
    observer.config_loaded(source=source, host=cfg.host, port=cfg.port)

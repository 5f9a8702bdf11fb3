"""CLI entrypoint for safety-eval — typer app with `serve` and `score` commands."""

import json
import sys
from pathlib import Path

import structlog
import typer
import uvicorn
from pydantic import ValidationError

from safety_eval.api.infrastructure.app import create_app
from safety_eval.api.infrastructure.observer import StructlogApiObserver
from safety_eval.config.domain.service import ServiceConfig
from safety_eval.config.infrastructure.loader import (
    YamlConfigLoader,
    load_config_from_env,
)
from safety_eval.config.infrastructure.observer import StructlogConfigObserver
from safety_eval.core.errors import SafetyEvalError
from safety_eval.scoring.application.service import JSON_MODE, EvaluationService
from safety_eval.scoring.domain.request import (
    EvaluationRequest,
    JsonEvaluationRequest,
)
from safety_eval.scoring.domain.result import EvaluationResult, ScoringMode
from safety_eval.scoring.infrastructure.observer import StructlogScoringObserver

app = typer.Typer(add_completion=False)

_MODES = (ScoringMode.STRICT.value, ScoringMode.LENIENT.value, JSON_MODE)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> ServiceConfig:
    observer = StructlogConfigObserver()
    if config_path is None:
        return load_config_from_env(observer=observer)
    return YamlConfigLoader(observer=observer).load(path=config_path)


def _score_request(raw: str, mode: str) -> EvaluationResult:
    """Validate *raw* as a request body for *mode* and score it."""
    service = EvaluationService(observer=StructlogScoringObserver())
    if mode == JSON_MODE:
        return service.evaluate_json(JsonEvaluationRequest.model_validate_json(raw))
    request = EvaluationRequest.model_validate_json(raw)
    return service.evaluate(request, mode=ScoringMode(mode))


@app.command()
def serve(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to service config YAML (defaults to API_TOKEN/HOST/PORT env vars)",
    ),
    host: str | None = typer.Option(None, "--host", help="Override the bind host"),
    port: int | None = typer.Option(None, "--port", help="Override the bind port"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run the scoring HTTP service."""
    _configure_structlog(log_format=log_format)

    try:
        config = _load_config(config_path=config_path)
    except SafetyEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    api = create_app(
        config=config,
        scoring_observer=StructlogScoringObserver(),
        api_observer=StructlogApiObserver(),
    )
    structlog.get_logger().info(
        "service.starting", host=host or config.host, port=port or config.port
    )
    uvicorn.run(api, host=host or config.host, port=port or config.port)


@app.command()
def score(
    request_path: Path = typer.Argument(..., help="Path to a request body JSON file"),
    mode: str = typer.Option(
        ScoringMode.STRICT.value,
        "--mode",
        "-m",
        help="Scoring ladder: 'strict', 'lenient' or 'json'",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Score one request body and print the {score, reason} result as JSON."""
    _configure_structlog(log_format=log_format)

    if mode not in _MODES:
        typer.echo(f"Invalid mode: {mode!r}. Must be one of {', '.join(_MODES)}.")
        raise typer.Exit(code=1)

    try:
        raw = request_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        typer.echo(f"Failed to read request: file not found: {request_path}")
        raise typer.Exit(code=1) from exc
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Failed to read request: {request_path}: {exc}")
        raise typer.Exit(code=1) from exc

    try:
        result = _score_request(raw=raw, mode=mode)
    except ValidationError as exc:
        typer.echo(f"Failed to validate request: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(result.model_dump()))


if __name__ == "__main__":
    app()

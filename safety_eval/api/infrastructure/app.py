"""Application factory for the scoring service's FastAPI app."""

import importlib.resources

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from safety_eval.api.infrastructure.auth import require_bearer_token
from safety_eval.api.infrastructure.exception_handlers import (
    register_exception_handlers,
)
from safety_eval.api.infrastructure.observer import ApiObserver
from safety_eval.config.domain.service import ServiceConfig
from safety_eval.scoring.application.service import EvaluationService
from safety_eval.scoring.domain.observer import ScoringObserver
from safety_eval.scoring.domain.request import (
    EvaluationRequest,
    JsonEvaluationRequest,
)
from safety_eval.scoring.domain.result import EvaluationResult, ScoringMode


def _load_index_page() -> str:
    """Return the static info page shipped with the package."""
    pkg_files = importlib.resources.files("safety_eval.api.static")
    return pkg_files.joinpath("index.html").read_text(encoding="utf-8")


def create_app(
    config: ServiceConfig,
    scoring_observer: ScoringObserver,
    api_observer: ApiObserver,
) -> FastAPI:
    """Build the app with its routes, bearer auth, CORS and error handlers.

    *config* is stored on ``app.state`` for the lifetime of the process and
    is the only source of the shared API token.
    """
    app = FastAPI(title="safety-eval", docs_url=None, redoc_url=None)
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    register_exception_handlers(app, observer=api_observer)

    service = EvaluationService(observer=scoring_observer)
    index_page = _load_index_page()
    authenticated = [Depends(require_bearer_token)]

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> str:
        return index_page

    @app.post("/evaluate", dependencies=authenticated)
    async def evaluate(body: EvaluationRequest) -> EvaluationResult:
        return service.evaluate(body, mode=ScoringMode.STRICT)

    @app.post("/evaluate-lenient", dependencies=authenticated)
    async def evaluate_lenient(body: EvaluationRequest) -> EvaluationResult:
        return service.evaluate(body, mode=ScoringMode.LENIENT)

    @app.post("/evaluate-json", dependencies=authenticated)
    async def evaluate_json(body: JsonEvaluationRequest) -> EvaluationResult:
        return service.evaluate_json(body)

    return app

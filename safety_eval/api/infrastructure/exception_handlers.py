"""Exception handlers mapping project errors onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from safety_eval.api.infrastructure.errors import AuthenticationError
from safety_eval.api.infrastructure.observer import ApiObserver


def register_exception_handlers(app: FastAPI, observer: ApiObserver) -> None:
    async def authentication_handler(request: Request, exc: Exception) -> JSONResponse:
        reason = exc.reason if isinstance(exc, AuthenticationError) else str(exc)
        observer.request_unauthorized(path=request.url.path, reason=reason)
        return JSONResponse(
            status_code=401,
            content={"error": reason},
            headers={"WWW-Authenticate": "Bearer"},
        )

    async def validation_handler(request: Request, exc: Exception) -> JSONResponse:
        errors = exc.errors() if isinstance(exc, RequestValidationError) else []
        details = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in errors
        ]
        observer.request_invalid(path=request.url.path, error_count=len(details))
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request body", "details": details},
        )

    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)

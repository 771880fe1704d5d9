"""Gestion centralisée des erreurs API.

Toutes les erreurs sont rendues sous la forme `{"error": "<message court>"}` avec un statut 500.
Le détail technique (fournisseur, cause) n'est jamais renvoyé au client, seulement journalisé.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from greeter.core.http_constants import HTTP_INTERNAL_SERVER_ERROR
from greeter.domain.errors import UpstreamError

log = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def create_error_response(
    message: str, status_code: int = HTTP_INTERNAL_SERVER_ERROR
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def extract_request_id(request: Request) -> str | None:
    """Identifiant de requête posé par `RequestIDMiddleware`, s'il existe."""
    return getattr(request.state, "request_id", None)


def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    """Handle provider failures with a stage-specific message."""
    log.error(
        "upstream_error",
        stage=exc.stage.value,
        kind=exc.kind.value,
        provider=exc.provider,
        detail=exc.detail,
        error_message=exc.message,
        request_id=extract_request_id(request),
    )
    return create_error_response(exc.message)


def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions so that the process never crashes on a request."""
    log.error(
        "unexpected_error",
        exception_type=type(exc).__name__,
        exception_message=str(exc),
        request_id=extract_request_id(request),
        exc_info=exc,
    )
    return create_error_response(INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UpstreamError, handle_upstream_error)
    app.add_exception_handler(Exception, handle_generic_exception)

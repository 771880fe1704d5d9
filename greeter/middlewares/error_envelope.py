"""Middleware Starlette convertissant les exceptions inattendues en réponse 500 `{"error": ...}`.

Placé au plus près des routes pour que les middlewares externes (request id, timing, Prometheus)
traitent cette réponse comme n'importe quelle autre.
"""

from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware

from greeter.api.errors import handle_generic_exception


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Middleware rendant toute exception non gérée en enveloppe d'erreur JSON."""

    async def dispatch(self, request, call_next: Callable):
        try:
            return await call_next(request)
        except Exception as exc:
            return handle_generic_exception(request, exc)

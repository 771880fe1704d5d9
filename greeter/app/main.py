"""
Application principale FastAPI.

Ce module assemble tous les composants de l'application : middlewares, gestionnaires d'erreurs,
routes et métriques du service d'accueil géolocalisé.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (request id, timing, Prometheus, enveloppe d'erreur)
- Enregistrer les gestionnaires d'erreurs `{"error": ...}`
- Monter les routers (accueil, santé, métriques)
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from greeter.api.errors import register_exception_handlers
from greeter.api.routes_health import router as health_router
from greeter.api.routes_hello import router as hello_router
from greeter.app.metrics import PrometheusMiddleware, metrics_router
from greeter.app.tracing import setup_tracing
from greeter.core.container import container
from greeter.core.logging import setup_logging
from greeter.middlewares.error_envelope import ErrorEnvelopeMiddleware
from greeter.middlewares.request_id import RequestIDMiddleware
from greeter.middlewares.timing import TimingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ferme les connexions sortantes à l'arrêt de l'application."""
    yield
    container.close()


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog) et le tracing optionnel
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes d'accueil, de santé et de métriques
    """
    setup_logging()
    settings = container.settings
    setup_tracing(settings)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG, lifespan=lifespan)
    app.add_middleware(ErrorEnvelopeMiddleware)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    app.include_router(hello_router)
    app.include_router(health_router)
    app.include_router(metrics_router)
    return app


app = create_app()

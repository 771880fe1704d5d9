"""
Routes d'accueil: message de bienvenue et salutation géolocalisée.

- `GET /` renvoie un message statique incluant l'IP de l'appelant (aucun appel sortant).
- `GET /api/hello` géolocalise l'appelant, récupère la température locale et compose le message.
"""

import structlog
from fastapi import APIRouter, Request

from greeter.api.deps import get_client_ip, get_lookup_ip, normalize_visitor_name
from greeter.api.schemas import ApiResponse, ErrorResponse, HomeResponse
from greeter.core.container import container
from greeter.core.http_constants import HTTP_INTERNAL_SERVER_ERROR

router = APIRouter(tags=["hello"])
log = structlog.get_logger(__name__)


@router.get("/", response_model=HomeResponse)
def home(request: Request):
    """Message de bienvenue avec l'IP brute de l'appelant."""
    message = f"Welcome to the HNG stage one task! Your IP is: {get_client_ip(request)}"
    log.info("home_visited", message=message)
    return {"message": message}


@router.get(
    "/api/hello",
    response_model=ApiResponse,
    responses={HTTP_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
def hello(request: Request, visitor_name: str | None = None):
    """
    Salue le visiteur avec la température de sa ville.

    Paramètres:
    - visitor_name: nom affiché (défaut "Guest").

    Retour: `ApiResponse`. Tout échec fournisseur est converti en 500 `{"error": ...}` par le
    gestionnaire d'exceptions de l'application.
    """
    return container.greeting_service.greet(
        get_lookup_ip(request), normalize_visitor_name(visitor_name)
    )

"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` sans appel aux fournisseurs externes.
"""


from fastapi import APIRouter

from greeter.api.schemas import HealthResponse
from greeter.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    """Vérifie la disponibilité de l'API et indique le fournisseur de géolocalisation actif."""
    return {"status": "ok", "geo_provider": container.geo_provider.name}

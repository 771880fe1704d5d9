# Schémas Pydantic exposés par l'API (réponses).

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Réponse de `/api/hello`.

    Champs:
    - client_ip: str (IP transmise au fournisseur de géolocalisation)
    - location: str (ex. "Lagos, Nigeria")
    - greeting: str (message composé)
    """

    client_ip: str
    location: str
    greeting: str


class HomeResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    geo_provider: str


class ErrorResponse(BaseModel):
    """Enveloppe d'erreur renvoyée avec un statut 500."""

    error: str

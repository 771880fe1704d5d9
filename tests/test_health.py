"""Tests pour l'endpoint de santé de l'application."""

from greeter.core.container import container
from greeter.core.http_constants import HTTP_OK


def test_health(client):
    """Teste que l'endpoint de santé retourne un statut OK."""
    r = client.get("/health")
    assert r.status_code == HTTP_OK
    assert r.json() == {"status": "ok", "geo_provider": container.geo_provider.name}

"""Configuration de test pour pytest avec gestion des chemins et fournisseurs simulés.

Ce module ajoute la racine du projet au sys.path et fournit des fournisseurs de géolocalisation et
de météo branchés sur `httpx.MockTransport`, sans aucun appel réseau réel.
"""

import os
import sys

import httpx
import pytest

# Ensure project root is on sys.path so that
# imports like `from greeter...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from greeter.app.main import app  # noqa: E402
from greeter.core.container import container  # noqa: E402
from greeter.domain.services import GreetingService  # noqa: E402
from greeter.infra.http_clients import GEO_PROVIDERS, WeatherClient  # noqa: E402
from tests.fakes import ProviderStub  # noqa: E402


@pytest.fixture()
def stub() -> ProviderStub:
    return ProviderStub()


@pytest.fixture()
def mock_http_client(stub: ProviderStub):
    client = httpx.Client(transport=httpx.MockTransport(stub.handler))
    yield client
    client.close()


@pytest.fixture()
def geo_provider_name() -> str:
    return "geoapify"


@pytest.fixture()
def providers(monkeypatch, mock_http_client, geo_provider_name):
    """Remplace le service du conteneur par des clients branchés sur le transport simulé."""
    geo = GEO_PROVIDERS[geo_provider_name]("geo-test-key", mock_http_client)
    weather = WeatherClient("weather-test-key", mock_http_client)
    monkeypatch.setattr(container, "greeting_service", GreetingService(geo, weather))
    return geo, weather


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)

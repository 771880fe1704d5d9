"""
Tests pour la résolution des variables d'environnement.

Ce module teste le chargement des paramètres depuis un fichier .env personnalisé et depuis
l'environnement.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from greeter.app.main import app
from greeter.core.container import Container, container
from greeter.core.http_constants import HTTP_OK
from greeter.core.settings import Settings, get_settings, resolve_env_file


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("ENV_FILE", "APP_ENV", "PORT", "GEO_PROVIDER", "WEATHER_API_KEY", "IP_GEOLOCATION_API_KEY"):
        monkeypatch.delenv(key, raising=False)


def test_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    env = tmp_path / ".env.custom"
    env.write_text(
        "IP_GEOLOCATION_API_KEY=geo-key\nWEATHER_API_KEY=owm-key\nPORT=9090\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ENV_FILE", str(env))

    s = get_settings()
    assert s.IP_GEOLOCATION_API_KEY == "geo-key"
    assert s.WEATHER_API_KEY == "owm-key"
    assert s.PORT == 9090


def test_environment_overrides_env_file(tmp_path: Path, monkeypatch) -> None:
    env = tmp_path / ".env"
    env.write_text("PORT=9090\n", encoding="utf-8")
    monkeypatch.setenv("ENV_FILE", str(env))
    monkeypatch.setenv("PORT", "7000")
    assert get_settings().PORT == 7000


def test_defaults_without_env_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    s = get_settings()
    assert s.PORT == 8080
    assert s.GEO_PROVIDER == "geoapify"
    assert s.FALLBACK_CLIENT_IP == "8.8.8.8"


def test_app_env_specific_file_is_preferred(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("PORT=1\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("PORT=2\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_ENV", "staging")
    assert resolve_env_file() == tmp_path / ".env.staging"
    assert get_settings().PORT == 2


def test_unknown_geo_provider_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("GEO_PROVIDER", "maxmind")
    with pytest.raises(ValidationError):
        Settings()


def test_container_wires_selected_provider(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GEO_PROVIDER", "ipgeolocation")
    c = Container()
    try:
        assert c.geo_provider.name == "ipgeolocation"
        assert c.greeting_service.geo is c.geo_provider
    finally:
        c.close()
    assert c.http_client.is_closed


def test_app_shutdown_closes_http_client(monkeypatch) -> None:
    """Teste que l'arrêt de l'application ferme le client HTTP du conteneur."""
    http_client = httpx.Client()
    monkeypatch.setattr(container, "http_client", http_client)
    with TestClient(app) as c:
        assert c.get("/health").status_code == HTTP_OK
        assert not http_client.is_closed
    assert http_client.is_closed

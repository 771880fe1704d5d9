"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def resolve_env_file() -> Path:
    """Retourne le fichier `.env` à charger.

    Priorité:
    1) ENV_FILE (chemin explicite)
    2) .env.{APP_ENV} si présent
    3) .env (défaut, absent toléré)
    """
    explicit = os.getenv("ENV_FILE")
    if explicit:
        return Path(explicit)
    cwd = Path.cwd()
    specific = cwd / f".env.{os.getenv('APP_ENV', 'dev')}"
    if specific.exists():
        return specific
    return cwd / ".env"


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )
    APP_NAME: str = "visitor-greeter"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = False
    APP_HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Providers
    GEO_PROVIDER: Literal["geoapify", "ipgeolocation"] = "geoapify"
    IP_GEOLOCATION_API_KEY: str = ""
    WEATHER_API_KEY: str = ""
    # httpx default timeout
    HTTP_TIMEOUT_SECONDS: float = 5.0

    # Client IP resolution
    TRUST_FORWARDED_FOR: bool = True
    FALLBACK_CLIENT_IP: str = "8.8.8.8"

    OTLP_ENDPOINT: str | None = None


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings(_env_file=resolve_env_file())

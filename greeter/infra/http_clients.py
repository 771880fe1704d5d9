"""Clients HTTP externes (géolocalisation IP, météo).

Objectif du module
------------------
- Encapsuler les appels réseau vers des services tiers.
- Normaliser les schémas JSON propres à chaque fournisseur en `GeoResult` / `WeatherResult`.
- Traduire chaque échec (construction, réseau, statut, lecture, JSON) en `UpstreamError`.

Aucun retry ni cache: un échec est terminal pour la requête en cours.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from greeter.app.metrics import UPSTREAM_LATENCY, UPSTREAM_REQUESTS
from greeter.core.http_constants import (
    FORWARDED_FOR_HEADER,
    HTTP_SUCCESS_MAX,
    HTTP_SUCCESS_MIN,
)
from greeter.domain.entities import GeoResult, WeatherResult
from greeter.domain.errors import FailureKind, Stage, UpstreamError

GEOAPIFY_URL = "https://api.geoapify.com/v1/ipinfo"
IPGEOLOCATION_URL = "https://api.ipgeolocation.io/ipgeo"
OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"

log = structlog.get_logger(__name__)


class ProviderClient:
    """Base commune: un GET JSON vers un fournisseur, avec taxonomie d'erreurs."""

    name: str = "provider"
    stage: Stage = Stage.LOCATION

    def __init__(self, api_key: str, client: httpx.Client) -> None:
        self._api_key = api_key
        self._client = client

    def _fail(self, kind: FailureKind, detail: str | None = None) -> UpstreamError:
        UPSTREAM_REQUESTS.labels(self.name, kind.value).inc()
        return UpstreamError(self.stage, kind, self.name, detail)

    def _get_json(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Exécute un GET et retourne le corps JSON décodé.

        Étapes distinctes pour que l'erreur indique précisément ce qui a échoué:
        construction de la requête, envoi, statut, lecture du corps, décodage JSON.
        """
        if not self._api_key:
            raise self._fail(FailureKind.REQUEST, "api key not configured")
        try:
            request = self._client.build_request("GET", url, params=params, headers=headers)
        except (httpx.InvalidURL, ValueError) as exc:
            raise self._fail(FailureKind.REQUEST, str(exc)) from exc

        start = time.perf_counter()
        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise self._fail(FailureKind.FETCH, f"{type(exc).__name__}: {exc}") from exc
        try:
            if not HTTP_SUCCESS_MIN <= response.status_code < HTTP_SUCCESS_MAX:
                raise self._fail(FailureKind.FETCH, f"status {response.status_code}")
            try:
                response.read()
            except httpx.HTTPError as exc:
                raise self._fail(FailureKind.READ, str(exc)) from exc
        finally:
            response.close()
            UPSTREAM_LATENCY.labels(self.name).observe(time.perf_counter() - start)

        try:
            payload = response.json()
        except ValueError as exc:
            raise self._fail(FailureKind.PARSE, str(exc)) from exc
        UPSTREAM_REQUESTS.labels(self.name, "ok").inc()
        return payload

    def _validate(self, model: type[BaseModel], payload: Any) -> Any:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise self._fail(FailureKind.PARSE, str(exc)) from exc


# --- Géolocalisation -------------------------------------------------------------------------


class _Named(BaseModel):
    name: str | None = None


class GeoapifyPayload(BaseModel):
    """Sous-ensemble utile de la réponse `ipinfo` de Geoapify."""

    ip: str | None = None
    city: _Named | None = None
    country: _Named | None = None
    state: _Named | None = None
    continent: _Named | None = None


class IPGeolocationPayload(BaseModel):
    """Sous-ensemble utile de la réponse `ipgeo` d'ipgeolocation.io (schéma plat)."""

    ip: str | None = None
    city: str | None = None
    country_name: str | None = None
    state_prov: str | None = None


class GeoProvider(ProviderClient, ABC):
    """Fournisseur de géolocalisation IP."""

    stage = Stage.LOCATION

    def lookup(self, ip: str) -> GeoResult:
        """Résout ville/pays pour `ip`; lève `UpstreamError` si vide ou en échec."""
        geo = self._fetch(ip)
        if geo.is_empty:
            raise UpstreamError(self.stage, FailureKind.EMPTY, self.name, f"ip={ip}")
        return geo

    @abstractmethod
    def _fetch(self, ip: str) -> GeoResult:
        raise NotImplementedError


class GeoapifyClient(GeoProvider):
    """Geoapify: l'IP cible est transmise via l'en-tête X-Forwarded-For."""

    name = "geoapify"

    def _fetch(self, ip: str) -> GeoResult:
        payload = self._get_json(
            GEOAPIFY_URL,
            params={"apiKey": self._api_key},
            headers={FORWARDED_FOR_HEADER: ip},
        )
        data = self._validate(GeoapifyPayload, payload)
        return GeoResult(
            city=(data.city.name if data.city else None) or "",
            country=(data.country.name if data.country else None) or "",
        )


class IPGeolocationClient(GeoProvider):
    """ipgeolocation.io: l'IP cible est un paramètre de requête."""

    name = "ipgeolocation"

    def _fetch(self, ip: str) -> GeoResult:
        payload = self._get_json(
            IPGEOLOCATION_URL,
            params={"apiKey": self._api_key, "ip": ip},
        )
        data = self._validate(IPGeolocationPayload, payload)
        return GeoResult(city=data.city or "", country=data.country_name or "")


GEO_PROVIDERS: dict[str, type[GeoProvider]] = {
    GeoapifyClient.name: GeoapifyClient,
    IPGeolocationClient.name: IPGeolocationClient,
}


def build_geo_provider(name: str, api_key: str, client: httpx.Client) -> GeoProvider:
    """Instancie le fournisseur de géolocalisation configuré."""
    try:
        provider_cls = GEO_PROVIDERS[name]
    except KeyError as err:
        raise ValueError(f"Unknown geolocation provider: {name!r}") from err
    return provider_cls(api_key, client)


# --- Météo -----------------------------------------------------------------------------------


class _Main(BaseModel):
    temp: float


class OpenWeatherPayload(BaseModel):
    main: _Main


class WeatherClient(ProviderClient):
    """Client OpenWeatherMap (`/data/2.5/weather`, unités métriques)."""

    name = "openweathermap"
    stage = Stage.WEATHER

    def current(self, city: str) -> WeatherResult:
        """Température courante (°C) pour la ville résolue; sans ville, aucune requête."""
        if not city:
            raise self._fail(FailureKind.REQUEST, "no city to query")
        payload = self._get_json(
            OPENWEATHERMAP_URL,
            params={"q": city, "appid": self._api_key, "units": "metric"},
        )
        data = self._validate(OpenWeatherPayload, payload)
        return WeatherResult(temperature_celsius=data.main.temp)


def build_http_client(timeout_seconds: float) -> httpx.Client:
    """Client httpx partagé par les fournisseurs (thread-safe, connexions réutilisées)."""
    return httpx.Client(timeout=httpx.Timeout(timeout_seconds))

"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, client HTTP partagé, fournisseurs de géolocalisation
et de météo, service d'accueil) et expose un singleton `container` utilisé par le reste de
l'application.
"""

from greeter.core.settings import Settings, get_settings
from greeter.domain.services import GreetingService
from greeter.infra.http_clients import (
    WeatherClient,
    build_geo_provider,
    build_http_client,
)


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.http_client = build_http_client(self.settings.HTTP_TIMEOUT_SECONDS)
        self.geo_provider = build_geo_provider(
            self.settings.GEO_PROVIDER,
            self.settings.IP_GEOLOCATION_API_KEY,
            self.http_client,
        )
        self.weather_client = WeatherClient(self.settings.WEATHER_API_KEY, self.http_client)
        self.greeting_service = GreetingService(self.geo_provider, self.weather_client)

    def close(self) -> None:
        """Ferme le client HTTP partagé par les fournisseurs."""
        self.http_client.close()


container = Container()

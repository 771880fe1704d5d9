import structlog

from greeter.domain.entities import GeoResult, WeatherResult

log = structlog.get_logger(__name__)


def compose_greeting(visitor_name: str, weather: WeatherResult, geo: GeoResult) -> str:
    """Message d'accueil: température à deux décimales, suivie de la localisation."""
    return (
        f"Hello, {visitor_name}! The temperature is {weather.temperature_celsius:.2f} "
        f"degrees Celsius in {geo.location}"
    )


class GreetingService:
    """Service métier composant le message d'accueil d'un visiteur.

    Responsabilités:
    - Résoudre la localisation de l'IP via `geo_provider`.
    - Récupérer la température courante via `weather_client`, uniquement après succès de la
      géolocalisation (la requête météo dépend de la ville résolue).
    - Assembler la réponse `client_ip` / `location` / `greeting`.

    Les `UpstreamError` des fournisseurs sont propagées telles quelles à la couche API.
    """

    def __init__(self, geo_provider, weather_client):
        """Initialise le service avec ses dépendances.

        Paramètres:
        - geo_provider: `GeoProvider` (Geoapify ou ipgeolocation.io).
        - weather_client: `WeatherClient` OpenWeatherMap.
        """
        self.geo = geo_provider
        self.weather = weather_client

    def greet(self, client_ip: str, visitor_name: str) -> dict[str, str]:
        """Produit la réponse de `/api/hello` pour une IP déjà normalisée."""
        geo = self.geo.lookup(client_ip)
        weather = self.weather.current(geo.city)
        log.info(
            "visitor_greeted",
            client_ip=client_ip,
            location=geo.location,
            temperature=weather.temperature_celsius,
        )
        return {
            "client_ip": client_ip,
            "location": geo.location,
            "greeting": compose_greeting(visitor_name, weather, geo),
        }

"""
Entités du domaine métier.

Ce module définit les résultats normalisés des fournisseurs (géolocalisation, météo) construits à
chaque requête puis abandonnés.
"""

from pydantic import BaseModel


class GeoResult(BaseModel):
    """Ville/pays résolus pour une adresse IP."""

    city: str = ""
    country: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.city and not self.country

    @property
    def location(self) -> str:
        """Libellé affiché, ex. `Lagos, Nigeria` (parties vides omises)."""
        return ", ".join(part for part in (self.city, self.country) if part)


class WeatherResult(BaseModel):
    """Météo courante pour une localisation."""

    temperature_celsius: float

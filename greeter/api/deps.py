"""Dépendances partagées pour les routes de l'API.

But du module
-------------
- Résoudre l'IP du client (en-tête X-Forwarded-For ou pair TCP).
- Remplacer les adresses de loopback par une IP publique fixe pour que la géolocalisation
  fonctionne en développement local.
- Normaliser le nom du visiteur.
"""

import ipaddress

from fastapi import Request

from greeter.core.container import container
from greeter.core.http_constants import DEFAULT_VISITOR_NAME, FORWARDED_FOR_HEADER


def get_client_ip(request: Request) -> str:
    """IP brute de l'appelant (non remappée)."""
    if container.settings.TRUST_FORWARDED_FOR:
        forwarded = request.headers.get(FORWARDED_FOR_HEADER, "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client is None:
        return ""
    return request.client.host


def is_loopback(ip: str) -> bool:
    try:
        return ipaddress.ip_address(ip).is_loopback
    except ValueError:
        return False


def get_lookup_ip(request: Request) -> str:
    """IP transmise au fournisseur de géolocalisation (loopback remappé)."""
    ip = get_client_ip(request)
    if is_loopback(ip):
        return container.settings.FALLBACK_CLIENT_IP
    return ip


def normalize_visitor_name(visitor_name: str | None) -> str:
    name = (visitor_name or "").strip()
    return name or DEFAULT_VISITOR_NAME

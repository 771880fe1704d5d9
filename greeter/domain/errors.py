"""Erreurs métier levées lors des appels aux fournisseurs externes.

Chaque échec est terminal pour la requête: pas de retry. Le couple (stage, kind) détermine le
message court renvoyé au client.
"""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Appel sortant à l'origine de l'erreur."""

    LOCATION = "location"
    WEATHER = "weather"


class FailureKind(str, Enum):
    """Taxonomie des échecs d'un appel fournisseur."""

    REQUEST = "request"
    FETCH = "fetch"
    READ = "read"
    PARSE = "parse"
    EMPTY = "empty"


_VERBS = {
    FailureKind.FETCH: "fetch",
    FailureKind.READ: "read",
    FailureKind.PARSE: "parse",
}


class UpstreamError(Exception):
    """Échec d'un appel fournisseur, rendu en 500 `{"error": message}`."""

    def __init__(
        self,
        stage: Stage,
        kind: FailureKind,
        provider: str,
        detail: str | None = None,
    ) -> None:
        self.stage = stage
        self.kind = kind
        self.provider = provider
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.kind is FailureKind.EMPTY:
            return "Location data is empty"
        if self.kind is FailureKind.REQUEST:
            return f"Failed to create {self.stage.value} request"
        return f"Failed to {_VERBS[self.kind]} {self.stage.value} data"

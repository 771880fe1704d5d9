"""Tests pour l'activation conditionnelle du tracing OpenTelemetry."""

from greeter.app.tracing import setup_tracing
from greeter.core.settings import Settings


def test_tracing_disabled_without_endpoint(monkeypatch):
    monkeypatch.delenv("OTLP_ENDPOINT", raising=False)
    assert setup_tracing(Settings()) is False

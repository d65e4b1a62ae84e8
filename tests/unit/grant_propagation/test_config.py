"""Tests for environment-driven planner configuration."""

import pytest

from grant_propagation.config import GrantPropagationConfig


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in (
        "GRANT_PROPAGATION_DIALECT",
        "GRANT_PROPAGATION_TRACE",
        "OTEL_EXPORTER_OTLP_ENDPOINT",
        "OTEL_EXPORTER_OTLP_METRICS_ENDPOINT",
        "OTEL_METRICS_EXPORTER",
        "OTEL_DISABLE_EXPORTER",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    """Defaults target Postgres without tracing."""
    config = GrantPropagationConfig.from_env()
    assert config == GrantPropagationConfig(dialect="postgres", trace_enabled=False)


def test_dialect_aliases_are_normalized(monkeypatch):
    """Dialect aliases normalize to sqlglot names."""
    monkeypatch.setenv("GRANT_PROPAGATION_DIALECT", " PostgreSQL ")
    assert GrantPropagationConfig.from_env().dialect == "postgres"


def test_trace_flag_overrides_exporter_detection(monkeypatch):
    """An explicit trace flag wins over exporter detection."""
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4317")
    assert GrantPropagationConfig.from_env().trace_enabled is True
    monkeypatch.setenv("GRANT_PROPAGATION_TRACE", "off")
    assert GrantPropagationConfig.from_env().trace_enabled is False

"""Environment-driven settings for grant propagation planning."""

from __future__ import annotations

from dataclasses import dataclass

from common.config.env import get_env_str
from common.observability.metrics import is_metrics_enabled
from common.sql.dialect import normalize_sqlglot_dialect


@dataclass(frozen=True)
class GrantPropagationConfig:
    """Planner settings.

    dialect: sqlglot dialect used when quoting identifiers.
    trace_enabled: open an OTEL span around each planning call.
    """

    dialect: str = "postgres"
    trace_enabled: bool = False

    @classmethod
    def from_env(cls) -> "GrantPropagationConfig":
        return cls(
            dialect=normalize_sqlglot_dialect(get_env_str("GRANT_PROPAGATION_DIALECT")),
            trace_enabled=is_metrics_enabled("GRANT_PROPAGATION_TRACE"),
        )

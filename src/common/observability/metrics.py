"""Optional OTEL counters for GRANT/REVOKE propagation planning."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from opentelemetry import metrics

from common.config.env import get_env_bool

logger = logging.getLogger(__name__)

PLANS_COUNTER = "grant_propagation.plans"
JOBS_COUNTER = "grant_propagation.jobs"

_COUNTER_DESCRIPTIONS = {
    PLANS_COUNTER: "GRANT/REVOKE planning calls",
    JOBS_COUNTER: "Propagation jobs produced",
}


def is_metrics_enabled(enabled_env_var: str) -> bool:
    """Resolve enablement from an explicit flag, else from a configured OTLP endpoint."""
    raw = os.getenv(enabled_env_var)
    if raw is None:
        return bool((os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or "").strip())
    try:
        return get_env_bool(enabled_env_var, False) is True
    except ValueError:
        logger.warning("Invalid %s value '%s'; treating as disabled.", enabled_env_var, raw)
        return False


@dataclass
class PlanningMetrics:
    """Counters for planning outcomes, emitted only when enabled."""

    meter_name: str
    enabled_env_var: str
    _meter: Any = None
    _counters: Dict[str, Any] = field(default_factory=dict)

    def enabled(self) -> bool:
        return is_metrics_enabled(self.enabled_env_var)

    def record_plan(
        self, statement_kind: str, outcome: str, *, error_group: Optional[str] = None
    ) -> None:
        """Count one planning call: ``planned``, ``noop`` or ``error``."""
        attributes = {"statement_kind": statement_kind, "outcome": outcome}
        if error_group:
            attributes["error_group"] = error_group
        self._add(PLANS_COUNTER, 1, attributes)

    def record_jobs(self, statement_kind: str, job_count: int) -> None:
        if job_count:
            self._add(JOBS_COUNTER, job_count, {"statement_kind": statement_kind})

    def _add(self, name: str, value: int, attributes: Dict[str, str]) -> None:
        if not self.enabled():
            return
        try:
            counter = self._counters.get(name)
            if counter is None:
                if self._meter is None:
                    self._meter = metrics.get_meter(self.meter_name)
                counter = self._meter.create_counter(
                    name=name, description=_COUNTER_DESCRIPTIONS.get(name, ""), unit="1"
                )
                self._counters[name] = counter
            counter.add(value, attributes)
        except Exception as exc:
            logger.debug("Counter metric emission failed for %s: %s", name, exc)


propagation_metrics = PlanningMetrics(
    meter_name="grant-propagation",
    enabled_env_var="GRANT_PROPAGATION_METRICS_ENABLED",
)

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from common.observability.context import run_id_var
from grant_propagation.models import AuthorizationChangeRequest


class _NoopSpan:
    def set_attribute(self, key: str, value: Any) -> None:
        return None


@contextmanager
def planning_span(
    request: AuthorizationChangeRequest, *, enabled: bool, name: str = "grant_propagation.plan"
) -> Iterator[Any]:
    """Wrap one planning call in an OTEL span when tracing is enabled."""
    if not enabled:
        yield _NoopSpan()
        return

    from opentelemetry import trace

    tracer = trace.get_tracer("grant_propagation")
    with tracer.start_as_current_span(name) as span:
        run_id: Optional[str] = run_id_var.get()
        if run_id:
            span.set_attribute("run_id", run_id)
        span.set_attribute("grant.statement_kind", request.statement_kind)
        span.set_attribute("grant.object_kind", request.object_kind.value)
        span.set_attribute("grant.target_mode", request.target_mode.value)
        try:
            yield span
            span.set_attribute("grant.status", "ok")
        except Exception:
            span.set_attribute("grant.status", "error")
            raise

"""Entry point: plan the propagation of a GRANT/REVOKE across the cluster."""

from __future__ import annotations

import logging
from typing import List, Optional

from common.errors.error_codes import error_code_group
from common.observability.metrics import propagation_metrics
from grant_propagation.config import GrantPropagationConfig
from grant_propagation.eligibility import ensure_coordinator, filter_eligible_targets
from grant_propagation.errors import GrantPropagationError
from grant_propagation.interfaces import CatalogService, RoleChecker, TaskPlanner
from grant_propagation.job_builder import build_propagation_jobs
from grant_propagation.models import AuthorizationChangeRequest, PropagationJob
from grant_propagation.resolver import resolve_target_objects
from grant_propagation.tracing import planning_span

logger = logging.getLogger(__name__)


class GrantPropagationPlanner:
    """Plans propagation jobs for GRANT/REVOKE statements on distributed tables.

    The planner only reads from its collaborators. Each ``plan`` call either
    returns a complete job list or raises; no partial results are returned.
    """

    def __init__(
        self,
        catalog: CatalogService,
        role_checker: RoleChecker,
        task_planner: TaskPlanner,
        config: Optional[GrantPropagationConfig] = None,
    ) -> None:
        self._catalog = catalog
        self._role_checker = role_checker
        self._task_planner = task_planner
        self._config = config or GrantPropagationConfig.from_env()

    @property
    def config(self) -> GrantPropagationConfig:
        return self._config

    def plan(self, request: AuthorizationChangeRequest) -> List[PropagationJob]:
        """Return the propagation jobs for ``request``.

        Returns an empty list when the statement touches no distributed object.

        Raises:
            ObjectNotFoundError: a named relation or schema does not exist.
            NotCoordinatorError: distributed objects are involved but this
                node is not the coordinator.
            MalformedPrivilegeListError: ALL appears after the first position.
        """
        with planning_span(request, enabled=self._config.trace_enabled) as span:
            try:
                jobs = self._plan(request)
            except GrantPropagationError as exc:
                propagation_metrics.record_plan(
                    request.statement_kind, "error", error_group=error_code_group(exc.error_code)
                )
                raise
            span.set_attribute("grant.job_count", len(jobs))

        propagation_metrics.record_plan(request.statement_kind, "planned" if jobs else "noop")
        propagation_metrics.record_jobs(request.statement_kind, len(jobs))
        return jobs

    def _plan(self, request: AuthorizationChangeRequest) -> List[PropagationJob]:
        resolved = resolve_target_objects(request, self._catalog)
        eligibility = filter_eligible_targets(resolved)
        if not eligibility.is_eligible:
            logger.debug(
                "%s touches no distributed object; nothing to propagate",
                request.statement_kind,
            )
            return []

        ensure_coordinator(self._role_checker)

        jobs = build_propagation_jobs(
            eligibility.targets,
            request,
            catalog=self._catalog,
            task_planner=self._task_planner,
            dialect=self._config.dialect,
        )
        logger.info(
            "Planned %s propagation: %d job(s), %d distributed table(s)",
            request.statement_kind,
            len(jobs),
            eligibility.fully_tracked_count,
        )
        for job in jobs:
            logger.debug("Propagation job: %s", job.to_metadata())
        return jobs


def plan_authorization_propagation(
    request: AuthorizationChangeRequest,
    *,
    catalog: CatalogService,
    role_checker: RoleChecker,
    task_planner: TaskPlanner,
    config: Optional[GrantPropagationConfig] = None,
) -> List[PropagationJob]:
    """Plan the propagation jobs for one GRANT/REVOKE request."""
    planner = GrantPropagationPlanner(catalog, role_checker, task_planner, config=config)
    return planner.plan(request)

"""Package rendered commands into per-object propagation jobs."""

from __future__ import annotations

from typing import List, Optional, Sequence

from grant_propagation.deparser import render_command, render_grantees, render_privileges
from grant_propagation.interfaces import CatalogService, TaskPlanner
from grant_propagation.models import (
    AuthorizationChangeRequest,
    PropagationJob,
    ResolvedTargetObject,
)


def build_propagation_jobs(
    resolved_targets: Sequence[ResolvedTargetObject],
    request: AuthorizationChangeRequest,
    *,
    catalog: CatalogService,
    task_planner: TaskPlanner,
    dialect: Optional[str] = None,
) -> List[PropagationJob]:
    """Build one job per target, in resolver order.

    Distributed tables get shard tasks from ``task_planner``; other
    distributed objects (sequences) only carry the command for metadata sync.
    """
    # Rendered up front so a malformed privilege list fails before any job exists.
    privileges_text = render_privileges(request.privileges, dialect)
    grantees_text = render_grantees(request.grantees, dialect)

    jobs: List[PropagationJob] = []
    for target in resolved_targets:
        command = render_command(
            request,
            catalog.canonical_display_name(target.object_id),
            privileges_text=privileges_text,
            grantees_text=grantees_text,
            dialect=dialect,
        )
        tasks = ()
        if target.is_fully_tracked:
            tasks = tuple(task_planner.plan_tasks(target.object_id, command))
        jobs.append(
            PropagationJob(
                target_identity=target.object_id,
                canonical_command=command,
                execution_tasks=tasks,
            )
        )
    return jobs

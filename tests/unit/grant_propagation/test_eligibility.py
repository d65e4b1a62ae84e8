"""Tests for the distributed-object eligibility filter and coordinator gate."""

import pytest

from grant_propagation.eligibility import (
    ensure_coordinator,
    filter_eligible_targets,
    is_eligible,
)
from grant_propagation.errors import NotCoordinatorError
from grant_propagation.memory import StaticRoleChecker
from grant_propagation.models import ResolvedTargetObject, TargetTracking

TABLE = TargetTracking.DISTRIBUTED_TABLE
OBJECT = TargetTracking.DISTRIBUTED_OBJECT


def test_empty_resolution_is_not_eligible():
    """Nothing resolved means nothing to propagate."""
    result = filter_eligible_targets([])
    assert result.is_eligible is False
    assert result.targets == ()
    assert is_eligible([]) is False


def test_filter_keeps_order_and_counts_fully_tracked():
    """Targets keep resolver order; only tables count as fully tracked."""
    resolved = [ResolvedTargetObject(3, OBJECT), ResolvedTargetObject(1, TABLE)]
    result = filter_eligible_targets(resolved)
    assert result.targets == tuple(resolved)
    assert result.is_eligible is True
    assert result.fully_tracked_count == 1


def test_filter_always_collapses_repeated_targets():
    """Repeated object ids produce a single entry, keeping the first."""
    resolved = [
        ResolvedTargetObject(1, TABLE),
        ResolvedTargetObject(2, OBJECT),
        ResolvedTargetObject(1, TABLE),
    ]
    result = filter_eligible_targets(resolved)
    assert [target.object_id for target in result.targets] == [1, 2]


def test_ensure_coordinator_passes_on_coordinator():
    """The coordinator may plan distributed GRANT/REVOKE."""
    ensure_coordinator(StaticRoleChecker(coordinator=True))


def test_ensure_coordinator_rejects_worker():
    """Workers are rejected with NotCoordinatorError."""
    with pytest.raises(NotCoordinatorError) as exc_info:
        ensure_coordinator(StaticRoleChecker(coordinator=False))
    assert exc_info.value.error_code.value == "NOT_COORDINATOR"

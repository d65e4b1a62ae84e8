"""Decide whether a resolved statement needs cluster-wide propagation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from grant_propagation.errors import NotCoordinatorError
from grant_propagation.interfaces import RoleChecker
from grant_propagation.models import ResolvedTargetObject
from grant_propagation.resolver import deduplicate_targets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EligibilityResult:
    """Targets that need propagation, one per object id."""

    targets: Tuple[ResolvedTargetObject, ...]

    @property
    def is_eligible(self) -> bool:
        return bool(self.targets)

    @property
    def fully_tracked_count(self) -> int:
        return sum(1 for target in self.targets if target.is_fully_tracked)


def filter_eligible_targets(resolved: Sequence[ResolvedTargetObject]) -> EligibilityResult:
    """Collapse resolved targets to one entry per object id, keeping resolver order.

    The resolver has already dropped objects absent from distributed metadata,
    so every entry here is distributed; repeated names of the same object
    (``ON orders, public.orders``) are the only thing removed.
    """
    return EligibilityResult(targets=tuple(deduplicate_targets(list(resolved))))


def is_eligible(resolved: Sequence[ResolvedTargetObject]) -> bool:
    """Return True when at least one distributed object is involved."""
    return bool(resolved)


def ensure_coordinator(role_checker: RoleChecker) -> None:
    """Raise ``NotCoordinatorError`` unless this node is the coordinator."""
    if role_checker.is_coordinator_node():
        return
    logger.warning("Rejecting distributed GRANT/REVOKE planned outside the coordinator")
    raise NotCoordinatorError(
        "operation is not allowed on this node; connect to the coordinator and run it again"
    )

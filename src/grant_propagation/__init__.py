"""Coordinator-side planning of GRANT/REVOKE propagation to distributed tables."""

from grant_propagation.config import GrantPropagationConfig
from grant_propagation.errors import (
    GrantPropagationError,
    MalformedPrivilegeListError,
    NotCoordinatorError,
    ObjectNotFoundError,
)
from grant_propagation.models import (
    AuthorizationChangeRequest,
    DropBehavior,
    ObjectKind,
    PrivilegeSpec,
    PropagationJob,
    QualifiedName,
    ResolvedTargetObject,
    RoleSpec,
    RoleSpecType,
    TargetMode,
    TargetTracking,
)
from grant_propagation.planner import GrantPropagationPlanner, plan_authorization_propagation

__all__ = [
    "AuthorizationChangeRequest",
    "DropBehavior",
    "GrantPropagationConfig",
    "GrantPropagationError",
    "GrantPropagationPlanner",
    "MalformedPrivilegeListError",
    "NotCoordinatorError",
    "ObjectKind",
    "ObjectNotFoundError",
    "PrivilegeSpec",
    "PropagationJob",
    "QualifiedName",
    "ResolvedTargetObject",
    "RoleSpec",
    "RoleSpecType",
    "TargetMode",
    "TargetTracking",
    "plan_authorization_propagation",
]

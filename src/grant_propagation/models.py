"""Request and result models for grant/revoke propagation planning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ObjectKind(str, Enum):
    """Kind of object a GRANT/REVOKE statement targets."""

    TABLE = "table"
    SEQUENCE = "sequence"
    SCHEMA = "schema"
    FUNCTION = "function"
    DATABASE = "database"
    TYPE = "type"
    FOREIGN_SERVER = "foreign_server"


class TargetMode(str, Enum):
    """How the statement names its targets."""

    EXPLICIT_OBJECT_LIST = "explicit_object_list"
    ALL_OBJECTS_IN_SCHEMA = "all_objects_in_schema"


class DropBehavior(str, Enum):
    """Dependent-privilege behavior for REVOKE."""

    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"


class RoleSpecType(str, Enum):
    """Grantee kinds, named roles plus the special role keywords."""

    NAMED = "named"
    PUBLIC = "PUBLIC"
    CURRENT_USER = "CURRENT_USER"
    SESSION_USER = "SESSION_USER"
    CURRENT_ROLE = "CURRENT_ROLE"


class PrivilegeSpec(BaseModel):
    """One privilege in a GRANT/REVOKE list.

    ``name=None`` is the ALL sentinel, which the parser emits when ALL is
    combined with a column list (``GRANT ALL (a, b) ON ...``).
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    columns: Tuple[str, ...] = ()

    @classmethod
    def all_privileges(cls, columns: Tuple[str, ...] = ()) -> "PrivilegeSpec":
        return cls(name=None, columns=tuple(columns))

    @property
    def is_all_sentinel(self) -> bool:
        return not self.name


class RoleSpec(BaseModel):
    """A grantee reference."""

    model_config = ConfigDict(frozen=True)

    role_type: RoleSpecType = RoleSpecType.NAMED
    role_name: Optional[str] = None

    @model_validator(mode="after")
    def _named_role_has_name(self) -> "RoleSpec":
        if self.role_type is RoleSpecType.NAMED and not self.role_name:
            raise ValueError("Named role spec requires a role name.")
        return self

    @classmethod
    def named(cls, role_name: str) -> "RoleSpec":
        return cls(role_type=RoleSpecType.NAMED, role_name=role_name)

    @classmethod
    def public(cls) -> "RoleSpec":
        return cls(role_type=RoleSpecType.PUBLIC)


class QualifiedName(BaseModel):
    """A possibly schema-qualified name as written in the statement."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    schema_name: Optional[str] = None

    def __str__(self) -> str:
        if self.schema_name:
            return f"{self.schema_name}.{self.name}"
        return self.name


class AuthorizationChangeRequest(BaseModel):
    """Already-parsed GRANT/REVOKE statement handed to the planner."""

    model_config = ConfigDict(frozen=True)

    object_kind: ObjectKind = ObjectKind.TABLE
    target_mode: TargetMode = TargetMode.EXPLICIT_OBJECT_LIST
    # QualifiedName entries in explicit mode, schema names in schema mode.
    targets: Tuple[Union[QualifiedName, str], ...] = ()
    is_grant: bool = True
    grant_option: bool = False
    cascade_on_revoke: DropBehavior = DropBehavior.RESTRICT
    # Empty means ALL PRIVILEGES.
    privileges: Tuple[PrivilegeSpec, ...] = ()
    grantees: Tuple[RoleSpec, ...] = ()

    @property
    def statement_kind(self) -> str:
        return "GRANT" if self.is_grant else "REVOKE"


class TargetTracking(str, Enum):
    """How completely the metadata service tracks a resolved target."""

    DISTRIBUTED_TABLE = "distributed_table"
    DISTRIBUTED_OBJECT = "distributed_object"


@dataclass(frozen=True)
class ResolvedTargetObject:
    """A target object that is known to the distributed metadata."""

    object_id: Hashable
    tracking: TargetTracking

    @property
    def is_fully_tracked(self) -> bool:
        return self.tracking is TargetTracking.DISTRIBUTED_TABLE


@dataclass(frozen=True)
class PropagationJob:
    """One authorization change to apply to one object across the cluster."""

    target_identity: Hashable
    canonical_command: str
    execution_tasks: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not self.canonical_command:
            raise ValueError("PropagationJob requires a non-empty canonical command.")

    def to_metadata(self) -> dict:
        """Serialize job metadata for logs and response payloads."""
        return {
            "target_identity": self.target_identity,
            "canonical_command": self.canonical_command,
            "task_count": len(self.execution_tasks),
        }

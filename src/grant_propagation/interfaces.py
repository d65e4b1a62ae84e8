"""Collaborator protocols consumed by the planner."""

from typing import Any, Hashable, Protocol, Sequence, runtime_checkable

from grant_propagation.models import QualifiedName


@runtime_checkable
class CatalogService(Protocol):
    """Read-only access to relation/schema metadata and distribution state.

    Name resolution raises ``ObjectNotFoundError`` for unknown names.
    """

    def resolve_object_name(self, name: QualifiedName) -> Hashable:
        """Resolve a relation name (search-path aware) to its identifier."""
        ...

    def resolve_schema_name(self, name: str) -> Hashable:
        """Resolve a schema name to its identifier."""
        ...

    def is_distributed_table(self, object_id: Hashable) -> bool:
        """Return True for relations fully tracked as distributed tables."""
        ...

    def is_any_distributed_object(self, object_id: Hashable) -> bool:
        """Return True for any object recorded as distributed (e.g. sequences)."""
        ...

    def list_distributed_table_identifiers(self) -> Sequence[Hashable]:
        """Return every distributed table identifier in a stable order."""
        ...

    def schema_of(self, object_id: Hashable) -> Hashable:
        """Return the schema identifier a relation lives in."""
        ...

    def canonical_display_name(self, object_id: Hashable) -> str:
        """Return the schema-qualified, quoted name of a relation."""
        ...


@runtime_checkable
class RoleChecker(Protocol):
    """Reports the cluster role of the executing node."""

    def is_coordinator_node(self) -> bool:
        ...


@runtime_checkable
class TaskPlanner(Protocol):
    """Turns a command for one distributed table into execution tasks."""

    def plan_tasks(self, target_identity: Hashable, command_text: str) -> Sequence[Any]:
        ...

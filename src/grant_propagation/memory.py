"""In-memory collaborators for local planning and tests.

``InMemoryCatalog`` mimics the subset of relation metadata the planner reads;
``ShardTaskPlanner`` expands a command into one task per shard placement.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Set, Tuple

from common.sql.identifiers import quote_literal, quote_qualified_name
from grant_propagation.errors import ObjectNotFoundError
from grant_propagation.models import QualifiedName

FIRST_NORMAL_OBJECT_ID = 16384


@dataclass(frozen=True)
class RelationEntry:
    object_id: int
    schema_id: int
    name: str


@dataclass(frozen=True)
class ShardPlacement:
    shard_id: int
    node_name: str
    node_port: int = 5432


@dataclass(frozen=True)
class ShardDDLTask:
    """A command to run against one shard placement of a distributed table."""

    target_identity: Hashable
    shard_id: int
    node_name: str
    node_port: int
    command: str


@dataclass
class InMemoryCatalog:
    """Relation and schema metadata held in process memory."""

    search_path: Tuple[str, ...] = ("public",)
    dialect: Optional[str] = None
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(FIRST_NORMAL_OBJECT_ID))
    _schemas: Dict[str, int] = field(default_factory=dict)
    _schema_names: Dict[int, str] = field(default_factory=dict)
    _relations: Dict[int, RelationEntry] = field(default_factory=dict)
    _distributed_tables: List[int] = field(default_factory=list)
    _distributed_objects: Set[int] = field(default_factory=set)
    _placements: Dict[int, List[ShardPlacement]] = field(default_factory=dict)

    def add_schema(self, name: str) -> int:
        if name in self._schemas:
            return self._schemas[name]
        schema_id = next(self._ids)
        self._schemas[name] = schema_id
        self._schema_names[schema_id] = name
        return schema_id

    def add_relation(
        self,
        schema: str,
        name: str,
        *,
        relkind: str = "table",
        distributed_table: bool = False,
        distributed_object: bool = False,
    ) -> int:
        """Register a relation; distributed tables are also distributed objects."""
        if relkind == "sequence" and distributed_table:
            raise ValueError(f"Sequence {schema}.{name} cannot be a distributed table.")
        schema_id = self.add_schema(schema)
        object_id = next(self._ids)
        self._relations[object_id] = RelationEntry(object_id, schema_id, name)
        if distributed_table:
            self._distributed_tables.append(object_id)
        if distributed_table or distributed_object:
            self._distributed_objects.add(object_id)
        return object_id

    def add_shard_placement(self, object_id: int, placement: ShardPlacement) -> None:
        self._placements.setdefault(object_id, []).append(placement)

    def shard_placements(self, object_id: Hashable) -> List[ShardPlacement]:
        return list(self._placements.get(object_id, []))

    def schema_name_of(self, object_id: Hashable) -> str:
        return self._schema_names[self._relation(object_id).schema_id]

    def _relation(self, object_id: Hashable) -> RelationEntry:
        try:
            return self._relations[object_id]
        except KeyError:
            raise ObjectNotFoundError("relation", str(object_id)) from None

    def _lookup(self, schema_id: Optional[int], name: str) -> Optional[int]:
        for entry in self._relations.values():
            if entry.schema_id == schema_id and entry.name == name:
                return entry.object_id
        return None

    # CatalogService

    def resolve_object_name(self, name: QualifiedName) -> int:
        if name.schema_name:
            candidates = [name.schema_name]
        else:
            candidates = list(self.search_path)
        for schema in candidates:
            object_id = self._lookup(self._schemas.get(schema), name.name)
            if object_id is not None:
                return object_id
        raise ObjectNotFoundError("relation", str(name))

    def resolve_schema_name(self, name: str) -> int:
        try:
            return self._schemas[name]
        except KeyError:
            raise ObjectNotFoundError("schema", name) from None

    def is_distributed_table(self, object_id: Hashable) -> bool:
        return object_id in self._distributed_tables

    def is_any_distributed_object(self, object_id: Hashable) -> bool:
        return object_id in self._distributed_objects

    def list_distributed_table_identifiers(self) -> List[int]:
        return list(self._distributed_tables)

    def schema_of(self, object_id: Hashable) -> int:
        return self._relation(object_id).schema_id

    def canonical_display_name(self, object_id: Hashable) -> str:
        entry = self._relation(object_id)
        return quote_qualified_name(
            self._schema_names[entry.schema_id], entry.name, dialect=self.dialect
        )


@dataclass(frozen=True)
class StaticRoleChecker:
    coordinator: bool = True

    def is_coordinator_node(self) -> bool:
        return self.coordinator


@dataclass
class ShardTaskPlanner:
    """Expands a command into one ``worker_apply_shard_ddl_command`` call per placement."""

    catalog: InMemoryCatalog
    dialect: Optional[str] = None

    def plan_tasks(self, target_identity: Hashable, command_text: str) -> List[ShardDDLTask]:
        schema_literal = quote_literal(self.catalog.schema_name_of(target_identity), self.dialect)
        command_literal = quote_literal(command_text, self.dialect)
        return [
            ShardDDLTask(
                target_identity=target_identity,
                shard_id=placement.shard_id,
                node_name=placement.node_name,
                node_port=placement.node_port,
                command=(
                    f"SELECT worker_apply_shard_ddl_command ({placement.shard_id}, "
                    f"{schema_literal}, {command_literal})"
                ),
            )
            for placement in sorted(
                self.catalog.shard_placements(target_identity), key=lambda p: p.shard_id
            )
        ]

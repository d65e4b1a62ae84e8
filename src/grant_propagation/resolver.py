"""Resolve the objects a GRANT/REVOKE statement refers to.

A statement names its targets either one by one (``ON t1, t2``) or as every
table in a set of schemas (``ON ALL TABLES IN SCHEMA s``). Both forms produce
``ResolvedTargetObject`` entries; only objects recorded in the distributed
metadata are kept.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Hashable, List, Union

from grant_propagation.interfaces import CatalogService
from grant_propagation.models import (
    AuthorizationChangeRequest,
    ObjectKind,
    QualifiedName,
    ResolvedTargetObject,
    TargetMode,
    TargetTracking,
)

logger = logging.getLogger(__name__)

TargetResolver = Callable[[AuthorizationChangeRequest, CatalogService], List[ResolvedTargetObject]]


def _as_qualified_name(target: Union[QualifiedName, str]) -> QualifiedName:
    if isinstance(target, QualifiedName):
        return target
    return QualifiedName(name=target)


def _resolve_explicit_objects(
    request: AuthorizationChangeRequest, catalog: CatalogService
) -> List[ResolvedTargetObject]:
    resolved: List[ResolvedTargetObject] = []
    for target in request.targets:
        object_id = catalog.resolve_object_name(_as_qualified_name(target))
        if catalog.is_distributed_table(object_id):
            resolved.append(ResolvedTargetObject(object_id, TargetTracking.DISTRIBUTED_TABLE))
            continue

        # Distributed sequences may be named directly in GRANT ... ON TABLE.
        if catalog.is_any_distributed_object(object_id):
            resolved.append(ResolvedTargetObject(object_id, TargetTracking.DISTRIBUTED_OBJECT))
            continue

        logger.debug("Skipping non-distributed relation %s", target)
    return resolved


def _resolve_all_tables_in_schemas(
    request: AuthorizationChangeRequest, catalog: CatalogService
) -> List[ResolvedTargetObject]:
    schema_ids = set()
    for schema_name in request.targets:
        schema_ids.add(catalog.resolve_schema_name(str(schema_name)))

    return [
        ResolvedTargetObject(table_id, TargetTracking.DISTRIBUTED_TABLE)
        for table_id in catalog.list_distributed_table_identifiers()
        if catalog.schema_of(table_id) in schema_ids
    ]


_RESOLVERS: Dict[TargetMode, TargetResolver] = {
    TargetMode.EXPLICIT_OBJECT_LIST: _resolve_explicit_objects,
    TargetMode.ALL_OBJECTS_IN_SCHEMA: _resolve_all_tables_in_schemas,
}


def resolve_target_objects(
    request: AuthorizationChangeRequest, catalog: CatalogService
) -> List[ResolvedTargetObject]:
    """Return the distributed objects ``request`` changes privileges on.

    Only table-level statements are handled; any other object kind yields an
    empty list. Unknown relation or schema names raise ``ObjectNotFoundError``
    from the catalog before anything is returned.
    """
    if request.object_kind is not ObjectKind.TABLE:
        logger.debug(
            "Ignoring %s on unsupported object kind %s",
            request.statement_kind,
            request.object_kind.value,
        )
        return []

    resolver = _RESOLVERS[request.target_mode]
    return resolver(request, catalog)


def deduplicate_targets(targets: List[ResolvedTargetObject]) -> List[ResolvedTargetObject]:
    """Drop repeated object ids, keeping the first occurrence."""
    seen: set[Hashable] = set()
    unique: List[ResolvedTargetObject] = []
    for target in targets:
        if target.object_id in seen:
            continue
        seen.add(target.object_id)
        unique.append(target)
    return unique

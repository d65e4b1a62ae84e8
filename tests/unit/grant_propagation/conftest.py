"""Shared fixtures for grant propagation planning tests."""

import pytest

from grant_propagation.config import GrantPropagationConfig
from grant_propagation.memory import (
    InMemoryCatalog,
    ShardPlacement,
    ShardTaskPlanner,
    StaticRoleChecker,
)


@pytest.fixture
def catalog():
    """Catalog with distributed and local relations across two schemas."""
    cat = InMemoryCatalog()
    orders = cat.add_relation("public", "orders", distributed_table=True)
    customers = cat.add_relation("public", "customers", distributed_table=True)
    cat.add_relation("public", "local_notes")
    cat.add_relation("public", "orders_id_seq", relkind="sequence", distributed_object=True)
    cat.add_relation("public", "local_seq", relkind="sequence")
    events = cat.add_relation("analytics", "events", distributed_table=True)
    cat.add_relation("analytics", "scratch")
    cat.add_schema("empty")

    cat.add_shard_placement(orders, ShardPlacement(102008, "worker-1"))
    cat.add_shard_placement(orders, ShardPlacement(102009, "worker-2"))
    cat.add_shard_placement(customers, ShardPlacement(102010, "worker-1"))
    cat.add_shard_placement(events, ShardPlacement(102011, "worker-2"))
    return cat


@pytest.fixture
def task_planner(catalog):
    return ShardTaskPlanner(catalog)


@pytest.fixture
def coordinator():
    return StaticRoleChecker(coordinator=True)


@pytest.fixture
def config():
    return GrantPropagationConfig()

"""Shared utilities for SQL dialect handling."""

from typing import Optional


def normalize_sqlglot_dialect(dialect: Optional[str]) -> str:
    """Normalize a dialect name for use with sqlglot.

    Args:
        dialect: The dialect name to normalize (e.g., 'PostgreSQL', 'pg').

    Returns:
        A normalized lowercase string compatible with sqlglot.
    """
    if not dialect:
        return "postgres"

    d = dialect.lower().strip()

    # Grant propagation only targets Postgres-compatible clusters today.
    mapping = {
        "postgresql": "postgres",
        "pg": "postgres",
        "citus": "postgres",
        "cockroach": "postgres",
        "cockroachdb": "postgres",
        "redshift": "redshift",
    }

    return mapping.get(d, d)

"""Identifier quoting for re-executable SQL text."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from sqlglot import exp

from common.sql.dialect import normalize_sqlglot_dialect

_SAFE_IDENTIFIER_RE = re.compile(r"^[a-z_][a-z0-9_$]*$")

# Keywords that cannot appear as bare identifiers in Postgres.
RESERVED_KEYWORDS = frozenset(
    {
        "all", "analyse", "analyze", "and", "any", "array", "as", "asc",
        "asymmetric", "authorization", "binary", "both", "case", "cast",
        "check", "collate", "collation", "column", "concurrently", "constraint",
        "create", "cross", "current_catalog", "current_date", "current_role",
        "current_schema", "current_time", "current_timestamp", "current_user",
        "default", "deferrable", "desc", "distinct", "do", "else", "end",
        "except", "false", "fetch", "for", "foreign", "freeze", "from", "full",
        "grant", "group", "having", "ilike", "in", "initially", "inner",
        "intersect", "into", "is", "isnull", "join", "lateral", "leading",
        "left", "like", "limit", "localtime", "localtimestamp", "natural",
        "not", "notnull", "null", "offset", "on", "only", "or", "order",
        "outer", "overlaps", "placing", "primary", "references", "returning",
        "right", "select", "session_user", "similar", "some", "symmetric",
        "system_user", "table", "tablesample", "then", "to", "trailing", "true",
        "union", "unique", "user", "using", "variadic", "verbose", "when",
        "where", "window", "with",
    }
)


def identifier_needs_quotes(name: str) -> bool:
    """Return True when ``name`` would not survive case folding or parsing bare."""
    return not _SAFE_IDENTIFIER_RE.match(name) or name in RESERVED_KEYWORDS


def quote_identifier(name: str, dialect: Optional[str] = None) -> str:
    """Render an identifier, quoting only when required."""
    if not name:
        raise ValueError("Identifier must be a non-empty string.")
    node = exp.Identifier(this=name, quoted=identifier_needs_quotes(name))
    return node.sql(dialect=normalize_sqlglot_dialect(dialect))


def quote_qualified_name(*parts: Optional[str], dialect: Optional[str] = None) -> str:
    """Render a dotted name such as ``schema.table`` from its unquoted parts."""
    present = [part for part in parts if part]
    if not present:
        raise ValueError("Qualified name requires at least one part.")
    return ".".join(quote_identifier(part, dialect) for part in present)


def quote_identifier_list(names: Iterable[str], dialect: Optional[str] = None) -> str:
    """Render a parenthesized, comma-joined identifier list: ``(a, "B")``."""
    return "(" + ", ".join(quote_identifier(name, dialect) for name in names) + ")"


def quote_literal(value: str, dialect: Optional[str] = None) -> str:
    """Render a string literal with embedded quotes escaped for ``dialect``."""
    return exp.Literal.string(value).sql(dialect=normalize_sqlglot_dialect(dialect))

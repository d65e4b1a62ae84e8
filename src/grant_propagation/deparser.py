"""Render canonical GRANT/REVOKE text from a parsed request.

The original statement text is never forwarded: target names are replaced
with schema-qualified names so the command means the same thing on every
node regardless of ``search_path``.
"""

from __future__ import annotations

from typing import Optional, Sequence

from common.sql.identifiers import quote_identifier, quote_identifier_list
from grant_propagation.errors import MalformedPrivilegeListError
from grant_propagation.models import (
    AuthorizationChangeRequest,
    DropBehavior,
    PrivilegeSpec,
    RoleSpec,
    RoleSpecType,
)

ALL_PRIVILEGES = "ALL"


def render_privilege(privilege: PrivilegeSpec, position: int, dialect: Optional[str] = None) -> str:
    """Render one privilege, e.g. ``SELECT`` or ``UPDATE(a, b)``.

    The ALL sentinel is only valid in the first position.
    """
    if not privilege.is_all_sentinel:
        text = privilege.name
    elif position == 0:
        text = ALL_PRIVILEGES
    else:
        raise MalformedPrivilegeListError(position)

    if privilege.columns:
        text += quote_identifier_list(privilege.columns, dialect)
    return text


def render_privileges(
    privileges: Sequence[PrivilegeSpec], dialect: Optional[str] = None
) -> str:
    """Render the privilege list; an empty list means ALL."""
    if not privileges:
        return ALL_PRIVILEGES
    return ", ".join(
        render_privilege(privilege, position, dialect)
        for position, privilege in enumerate(privileges)
    )


def render_role_spec(role: RoleSpec, dialect: Optional[str] = None) -> str:
    """Render a grantee the way it must appear in a re-executed statement."""
    if role.role_type is RoleSpecType.NAMED:
        return quote_identifier(role.role_name, dialect)
    return role.role_type.value


def render_grantees(grantees: Sequence[RoleSpec], dialect: Optional[str] = None) -> str:
    return ", ".join(render_role_spec(role, dialect) for role in grantees)


def render_command(
    request: AuthorizationChangeRequest,
    target_text: str,
    *,
    privileges_text: Optional[str] = None,
    grantees_text: Optional[str] = None,
    dialect: Optional[str] = None,
) -> str:
    """Render the GRANT or REVOKE command for one target.

    ``privileges_text`` and ``grantees_text`` may be passed in when the same
    request is rendered for many targets.
    """
    if privileges_text is None:
        privileges_text = render_privileges(request.privileges, dialect)
    if grantees_text is None:
        grantees_text = render_grantees(request.grantees, dialect)

    if request.is_grant:
        grant_option = " WITH GRANT OPTION" if request.grant_option else ""
        return f"GRANT {privileges_text} ON {target_text} TO {grantees_text}{grant_option}"

    grant_option = "GRANT OPTION FOR " if request.grant_option else ""
    behavior = " CASCADE" if request.cascade_on_revoke is DropBehavior.CASCADE else " RESTRICT"
    return (
        f"REVOKE {grant_option}{privileges_text} ON {target_text} "
        f"FROM {grantees_text}{behavior}"
    )

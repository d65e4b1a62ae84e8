"""Fatal planning errors.

Each error aborts the whole planning call; no partial job list is returned.
"""

from __future__ import annotations

from common.errors.error_codes import ErrorCode


class GrantPropagationError(RuntimeError):
    """Base class for grant propagation planning failures."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR


class ObjectNotFoundError(GrantPropagationError, LookupError):
    """Raised when a relation or schema named in the statement does not exist."""

    error_code = ErrorCode.NOT_FOUND

    def __init__(self, object_kind: str, name: str) -> None:
        super().__init__(f'{object_kind} "{name}" does not exist')
        self.object_kind = object_kind
        self.name = name


class NotCoordinatorError(GrantPropagationError):
    """Raised when a distributed GRANT/REVOKE is planned outside the coordinator."""

    error_code = ErrorCode.NOT_COORDINATOR

    def __init__(self, message: str = "operation is not allowed on this node") -> None:
        super().__init__(message)


class MalformedPrivilegeListError(GrantPropagationError):
    """Raised when ALL appears anywhere but first, or a privilege lacks a name."""

    error_code = ErrorCode.MALFORMED_PRIVILEGE_LIST

    def __init__(self, position: int) -> None:
        super().__init__("Cannot parse GRANT/REVOKE privileges")
        self.position = position

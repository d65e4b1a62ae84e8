"""Tests for canonical error-code taxonomy helpers."""

from common.errors.error_codes import ErrorCode, error_code_group, parse_error_code
from grant_propagation.errors import (
    MalformedPrivilegeListError,
    NotCoordinatorError,
    ObjectNotFoundError,
)


def test_error_code_enum_values_are_stable():
    """Enum values should stay stable because external consumers depend on them."""
    assert ErrorCode.VALIDATION_ERROR.value == "VALIDATION_ERROR"
    assert ErrorCode.NOT_FOUND.value == "NOT_FOUND"
    assert ErrorCode.NOT_COORDINATOR.value == "NOT_COORDINATOR"
    assert ErrorCode.MALFORMED_PRIVILEGE_LIST.value == "MALFORMED_PRIVILEGE_LIST"
    assert ErrorCode.INTERNAL_ERROR.value == "INTERNAL_ERROR"


def test_parse_error_code_falls_back_for_unknown_values():
    """Unknown or missing values parse to the fallback code."""
    assert parse_error_code(" NOT_FOUND ") == ErrorCode.NOT_FOUND
    assert parse_error_code(None) == ErrorCode.INTERNAL_ERROR
    assert parse_error_code("nope", fallback=ErrorCode.VALIDATION_ERROR) == (
        ErrorCode.VALIDATION_ERROR
    )


def test_error_code_groups_are_stable():
    """Canonical error groups should remain bounded and deterministic."""
    assert error_code_group(ErrorCode.NOT_FOUND) == "CATALOG"
    assert error_code_group(ErrorCode.NOT_COORDINATOR) == "ROLE"
    assert error_code_group("MALFORMED_PRIVILEGE_LIST") == "INTERNAL"
    assert error_code_group("INVALID_VALUE") == "INTERNAL"


def test_planning_errors_carry_codes():
    """Each planning error exposes its canonical code."""
    not_found = ObjectNotFoundError("relation", "public.ghost")
    assert not_found.error_code == ErrorCode.NOT_FOUND
    assert isinstance(not_found, LookupError)
    assert str(not_found) == 'relation "public.ghost" does not exist'
    assert NotCoordinatorError().error_code == ErrorCode.NOT_COORDINATOR
    assert MalformedPrivilegeListError(2).error_code == ErrorCode.MALFORMED_PRIVILEGE_LIST

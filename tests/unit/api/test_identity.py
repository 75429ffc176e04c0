"""
Tests for gateway header identity resolution.
"""

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from testsystem.api.identity import HeaderIdentityProvider, parse_roles
from testsystem.domain.domain_type import UserRole
from testsystem.domain.domain_value import UserId


def make_request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/tests",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


def test_parse_roles_ignores_unknown_and_case():
    assert parse_roles(" Teacher, root ,ADMIN") == frozenset({UserRole.TEACHER, UserRole.ADMIN})


def test_parse_roles_empty():
    assert parse_roles(None) == frozenset()
    assert parse_roles("") == frozenset()


def test_principal_from_headers():
    provider = HeaderIdentityProvider()

    principal = provider.current_principal(make_request({"X-User-Id": "u1", "X-User-Roles": "teacher"}))

    assert principal.user_id == UserId("u1")
    assert principal.has_any_role(UserRole.TEACHER)
    assert not principal.has_any_role(UserRole.ADMIN)


def test_custom_header_names():
    provider = HeaderIdentityProvider(user_id_header="X-Auth-Sub", roles_header="X-Auth-Roles")

    principal = provider.current_principal(make_request({"X-Auth-Sub": "u9", "X-Auth-Roles": "admin"}))

    assert principal.user_id == UserId("u9")
    assert principal.roles == frozenset({UserRole.ADMIN})


@pytest.mark.parametrize("headers", [{}, {"X-User-Id": "   "}])
def test_missing_identity_is_unauthorized(headers: dict[str, str]):
    with pytest.raises(HTTPException) as exc_info:
        HeaderIdentityProvider().current_principal(make_request(headers))

    assert exc_info.value.status_code == 401

"""Caller identity resolution.

Authentication happens upstream. The gateway in front of this service
verifies the caller and forwards who they are in request headers; this
module turns those headers into a ``Principal``. Nothing here reads the
request body.
"""

from __future__ import annotations

import logging
from typing import Protocol

from fastapi import HTTPException, Request
from pydantic import ValidationError

from ..domain.domain_type import UserRole
from ..domain.domain_value import Principal, UserId

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Resolves the authenticated caller of a request."""

    def current_principal(self, request: Request) -> Principal:
        """Return the caller, or raise HTTPException(401) when there is none."""
        ...


def parse_roles(raw: str | None) -> frozenset[UserRole]:
    """Comma-separated role names to roles; unknown names are dropped."""
    if not raw:
        return frozenset()
    known = {role.value for role in UserRole}
    return frozenset(UserRole(name) for name in (part.strip().lower() for part in raw.split(",")) if name in known)


class HeaderIdentityProvider:
    """Reads the caller from gateway-supplied headers."""

    def __init__(self, user_id_header: str = "X-User-Id", roles_header: str = "X-User-Roles"):
        self.user_id_header = user_id_header
        self.roles_header = roles_header

    def current_principal(self, request: Request) -> Principal:
        raw_user_id = (request.headers.get(self.user_id_header) or "").strip()
        try:
            user_id = UserId(raw_user_id)
        except ValidationError as exc:
            logger.warning("Request to %s without %s header", request.url.path, self.user_id_header)
            raise HTTPException(status_code=401, detail="Not authenticated") from exc

        return Principal(
            user_id=user_id,
            roles=parse_roles(request.headers.get(self.roles_header)),
        )


__all__ = ["HeaderIdentityProvider", "IdentityProvider", "parse_roles"]

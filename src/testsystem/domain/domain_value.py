"""Identity Layer - Value Objects for Tests and Their Authors.

Strongly-typed wrappers around the opaque string identifiers used on the
wire. Keeping TestId and UserId distinct stops an author id from being
passed where a test id is expected (and vice versa) inside the service.
"""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .domain_type import UserRole


class TestId(RootModel[str]):
    """Opaque Identifier of a Test.

    Assigned by the store on insert and immutable afterwards.

    Usage:
        >>> test_id = TestId.generate()
        >>> redis_key = f"test:{test_id.root}"
    """

    __test__ = False

    root: str = Field(min_length=1)
    model_config = ConfigDict(frozen=True)

    @classmethod
    def generate(cls) -> TestId:
        """Fresh identifier for a newly inserted Test."""
        return cls(uuid4().hex)

    def __str__(self) -> str:
        return self.root


class UserId(RootModel[str]):
    """Identifier of an authenticated user, as supplied by the gateway."""

    root: str = Field(min_length=1)
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class Principal(BaseModel):
    """Resolved Caller Identity.

    Attributes:
        user_id: Who is calling; becomes the author of anything they create
        roles: Roles granted by the gateway (unknown roles already dropped)
    """

    user_id: UserId
    roles: frozenset[UserRole] = frozenset()

    model_config = ConfigDict(frozen=True)

    def has_any_role(self, *roles: UserRole) -> bool:
        return not self.roles.isdisjoint(roles)


__all__ = ["Principal", "TestId", "UserId"]

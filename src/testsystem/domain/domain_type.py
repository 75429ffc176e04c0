"""Domain Type System - Core Enumerations.

Defines type-safe constants using Python's StrEnum for domain concepts.
Using StrEnum instead of plain Enum provides automatic string coercion
and better JSON serialization without custom encoders.
"""

from enum import StrEnum


class UserRole(StrEnum):
    """Caller Roles Supplied by the Authenticating Gateway.

    Only ADMIN and TEACHER may manage tests. STUDENT exists so that a
    student principal resolves cleanly and is then rejected with 403
    instead of looking like an anonymous caller.
    """

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class UpdateLookup(StrEnum):
    """How the update path finds the record it is about to overwrite.

    OWNER: lookup scoped to (author, id); foreign records are NotFound.
    ID: lookup by id alone; any existing record is revised while its
        author is preserved. Kept for deployments relying on the legacy
        behavior.
    """

    OWNER = "owner"
    ID = "id"


class StoreBackend(StrEnum):
    """Persistence backends for Test records."""

    MEMORY = "memory"
    REDIS = "redis"


__all__ = ["StoreBackend", "UpdateLookup", "UserRole"]

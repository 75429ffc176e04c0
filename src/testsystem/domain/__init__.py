"""Domain Layer - Tests, Their Identities and Ownership Rules.

Key Components:
    - Test: Immutable quiz definition with pure copy-with-overrides transforms
    - TestId / UserId: Typed identifiers for records and their authors
    - Principal: Resolved caller identity passed explicitly to every operation
    - BadRequestError / NotFoundError: Failures the API maps to 400 / 404

Design Principles:
    - Immutable by Default: All domain models use frozen=True
    - Explicit Dependencies: The caller is an argument, never ambient state
    - No Framework Imports: FastAPI and Redis stay in the outer layers
"""

from .domain_type import StoreBackend, UpdateLookup, UserRole
from .domain_value import Principal, TestId, UserId
from .errors import BadRequestError, NotFoundError, TestSystemError
from .quiz import REVISABLE_FIELDS, Test

__all__ = [
    "REVISABLE_FIELDS",
    "BadRequestError",
    "NotFoundError",
    "Principal",
    "StoreBackend",
    "Test",
    "TestId",
    "TestSystemError",
    "UpdateLookup",
    "UserId",
    "UserRole",
]

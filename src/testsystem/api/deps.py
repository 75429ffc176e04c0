"""API dependency wiring - thin DI glue over the service factories."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from ..config import settings
from ..domain.domain_type import UserRole
from ..domain.domain_value import Principal
from ..service import TestAccessService, create_test_access_service
from ..service.storage import MemoryStoreConfig, StorageService, create_storage_service
from ..service.store import TestStore, create_test_store
from .identity import HeaderIdentityProvider, IdentityProvider

# Roles allowed to manage tests
TEST_MANAGER_ROLES: tuple[UserRole, ...] = (UserRole.ADMIN, UserRole.TEACHER)


@lru_cache(maxsize=1)
def get_storage_service() -> StorageService:
    """Create storage service from config (cached singleton)."""
    return create_storage_service(memory_config=MemoryStoreConfig(url=settings.redis_url))


@lru_cache(maxsize=1)
def get_test_store() -> TestStore:
    """Create the configured test store (cached singleton)."""
    return create_test_store(settings, get_storage_service())


@lru_cache(maxsize=1)
def get_test_service() -> TestAccessService:
    """Create test access service (cached singleton)."""
    return create_test_access_service(store=get_test_store(), update_lookup=settings.update_lookup)


@lru_cache(maxsize=1)
def get_identity_provider() -> IdentityProvider:
    """Create the gateway header identity provider (cached singleton)."""
    return HeaderIdentityProvider(
        user_id_header=settings.user_id_header,
        roles_header=settings.user_roles_header,
    )


def get_principal(
    request: Request,
    identity: Annotated[IdentityProvider, Depends(get_identity_provider)],
) -> Principal:
    """Authenticated caller of the current request (401 if none)."""
    return identity.current_principal(request)


def require_test_manager(
    principal: Annotated[Principal, Depends(get_principal)],
) -> Principal:
    """Caller, provided they hold an admin or teacher role (403 otherwise)."""
    if not principal.has_any_role(*TEST_MANAGER_ROLES):
        raise HTTPException(status_code=403, detail="Insufficient role")
    return principal

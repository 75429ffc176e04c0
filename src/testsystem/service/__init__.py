"""Service layer exports."""

from .quiz import TestAccessService, create_test_access_service
from .storage import MemoryStoreConfig, StorageService, create_storage_service
from .store import InMemoryTestStore, RedisTestStore, TestStore, create_test_store

__all__ = [
    "InMemoryTestStore",
    "MemoryStoreConfig",
    "RedisTestStore",
    "StorageService",
    "TestAccessService",
    "TestStore",
    "create_storage_service",
    "create_test_access_service",
    "create_test_store",
]

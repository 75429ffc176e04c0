"""Storage service - lazy holder for the Redis client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class MemoryStoreConfig(BaseModel):
    """Redis connection configuration."""

    url: str

    model_config = ConfigDict(frozen=True)


class StorageService:
    """
    Thin orchestrator - lazy-loads the Redis client from config.

    Responsibilities:
    - Provide the Redis client backing RedisTestStore
    - Lazy initialization so the memory backend never touches Redis
    - Close the connection pool on shutdown
    """

    def __init__(self, memory_config: MemoryStoreConfig):
        self.memory_config = memory_config
        self._memory_client: Redis | None = None

    def get_memory_client(self) -> Redis:
        """Get or create Redis client (lazy)."""
        if self._memory_client is None:
            from redis.asyncio import Redis

            self._memory_client = Redis.from_url(self.memory_config.url, decode_responses=True)
        return self._memory_client

    async def close(self) -> None:
        """Release the Redis connection pool if one was opened."""
        if self._memory_client is not None:
            await self._memory_client.aclose()
            self._memory_client = None
            logger.info("Closed redis connection pool")


def create_storage_service(memory_config: MemoryStoreConfig) -> StorageService:
    """Factory from infrastructure configs."""
    return StorageService(memory_config)


__all__ = ["MemoryStoreConfig", "StorageService", "create_storage_service"]

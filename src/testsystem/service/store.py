"""Test persistence - the store capability and its adapters.

``TestStore`` is the contract the service depends on. Two adapters ship:

- ``InMemoryTestStore``: process-local, used by tests and single-node dev
- ``RedisTestStore``: JSON records plus a per-author index set in Redis

Both make ``save`` and ``delete_by_author_and_id`` indivisible: a concurrent
reader sees the record either entirely present or entirely gone.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, ClassVar, Protocol

from ..domain.domain_type import StoreBackend
from ..domain.domain_value import TestId, UserId
from ..domain.quiz import Test

if TYPE_CHECKING:
    from redis.asyncio import Redis
    from redis.asyncio.client import Pipeline

    from ..config import Settings
    from .storage import StorageService

logger = logging.getLogger(__name__)


class TestStore(Protocol):
    """Persistence primitives over Test records."""

    __test__: ClassVar[bool] = False

    async def list_by_author(self, author_id: UserId) -> list[Test]: ...

    async def find_by_author_and_id(self, author_id: UserId, test_id: TestId) -> Test | None: ...

    async def find_by_id(self, test_id: TestId) -> Test | None: ...

    async def save(self, test: Test) -> Test:
        """Insert when ``test.id`` is None (assigning one), otherwise replace."""
        ...

    async def delete_by_author_and_id(self, author_id: UserId, test_id: TestId) -> None:
        """Delete atomically; silently does nothing when no record matches."""
        ...


class InMemoryTestStore:
    """Dict-backed store, ordered by insertion.

    A single asyncio.Lock serialises writes so each save or delete is
    observed as one step by other coroutines.
    """

    def __init__(self, tests: list[Test] | None = None):
        self._tests: dict[TestId, Test] = {}
        self._lock = asyncio.Lock()
        for test in tests or []:
            if test.id is None:
                test = test.with_id(TestId.generate())
            self._tests[test.id] = test

    def __len__(self) -> int:
        return len(self._tests)

    def snapshot(self) -> dict[TestId, Test]:
        """Copy of the current contents, for assertions."""
        return dict(self._tests)

    async def list_by_author(self, author_id: UserId) -> list[Test]:
        return [test for test in self._tests.values() if test.is_owned_by(author_id)]

    async def find_by_author_and_id(self, author_id: UserId, test_id: TestId) -> Test | None:
        test = self._tests.get(test_id)
        if test is None or not test.is_owned_by(author_id):
            return None
        return test

    async def find_by_id(self, test_id: TestId) -> Test | None:
        return self._tests.get(test_id)

    async def save(self, test: Test) -> Test:
        async with self._lock:
            if test.id is None:
                test = test.with_id(TestId.generate())
            self._tests[test.id] = test
        logger.debug("Saved test %s in memory", test.id)
        return test

    async def delete_by_author_and_id(self, author_id: UserId, test_id: TestId) -> None:
        async with self._lock:
            test = self._tests.get(test_id)
            if test is not None and test.is_owned_by(author_id):
                del self._tests[test_id]
                logger.debug("Deleted test %s from memory", test_id)


class RedisTestStore:
    """Redis-backed store.

    Key layout (``prefix`` defaults to ``testsystem:``):
        {prefix}test:{id}                 -> Test as JSON
        {prefix}author:{author_id}:tests  -> set of that author's test ids

    Writes go through MULTI/EXEC so the record and its index entry change
    together. Deletes WATCH the record to check ownership before removing it.
    """

    def __init__(self, redis: Redis, prefix: str = "testsystem:"):
        self.redis = redis
        self.prefix = prefix

    def _test_key(self, test_id: TestId) -> str:
        return f"{self.prefix}test:{test_id.root}"

    def _author_key(self, author_id: UserId) -> str:
        return f"{self.prefix}author:{author_id.root}:tests"

    async def list_by_author(self, author_id: UserId) -> list[Test]:
        members = await self.redis.smembers(self._author_key(author_id))
        if not members:
            return []

        ids = sorted(members)
        payloads = await self.redis.mget([f"{self.prefix}test:{member}" for member in ids])

        tests: list[Test] = []
        for payload in payloads:
            # Index entries can outlive their record after a replace that changed owner
            if payload is None:
                continue
            test = Test.model_validate_json(payload)
            if test.is_owned_by(author_id):
                tests.append(test)
        return tests

    async def find_by_author_and_id(self, author_id: UserId, test_id: TestId) -> Test | None:
        test = await self.find_by_id(test_id)
        if test is None or not test.is_owned_by(author_id):
            return None
        return test

    async def find_by_id(self, test_id: TestId) -> Test | None:
        payload = await self.redis.get(self._test_key(test_id))
        if payload is None:
            return None
        return Test.model_validate_json(payload)

    async def save(self, test: Test) -> Test:
        if test.id is None:
            test = test.with_id(TestId.generate())

        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.set(self._test_key(test.id), test.model_dump_json(by_alias=True))
            if test.author_id is not None:
                pipe.sadd(self._author_key(test.author_id), test.id.root)
            await pipe.execute()

        logger.debug("Saved test %s to redis", test.id)
        return test

    async def delete_by_author_and_id(self, author_id: UserId, test_id: TestId) -> None:
        test_key = self._test_key(test_id)
        author_key = self._author_key(author_id)

        async def _delete(pipe: Pipeline) -> None:
            payload = await pipe.get(test_key)
            if payload is None or not Test.model_validate_json(payload).is_owned_by(author_id):
                return
            pipe.multi()
            pipe.delete(test_key)
            pipe.srem(author_key, test_id.root)

        await self.redis.transaction(_delete, test_key)
        logger.debug("Delete of test %s for author %s committed", test_id, author_id)


def create_test_store(settings: Settings, storage: StorageService) -> TestStore:
    """Factory choosing the backend named by ``settings.store_backend``."""
    if settings.store_backend == StoreBackend.REDIS:
        return RedisTestStore(storage.get_memory_client(), prefix=settings.redis_key_prefix)
    return InMemoryTestStore()


__all__ = ["InMemoryTestStore", "RedisTestStore", "TestStore", "create_test_store"]

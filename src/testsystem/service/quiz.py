"""Test access service - per-author CRUD over the test store."""

from __future__ import annotations

import logging
from typing import ClassVar

from ..domain.domain_type import UpdateLookup
from ..domain.domain_value import TestId, UserId
from ..domain.errors import BadRequestError, NotFoundError
from ..domain.quiz import Test
from .store import TestStore

logger = logging.getLogger(__name__)


def _as_test_id(test_id: TestId | str | None) -> TestId | None:
    if test_id is None or isinstance(test_id, TestId):
        return test_id
    if not test_id.strip():
        return None
    return TestId(test_id)


class TestAccessService:
    """
    Adapter between an inbound request and the TestStore.

    Every operation takes the caller's identity as an explicit argument and
    scopes reads and writes to it. Another author's test behaves exactly like
    a test that does not exist.

    The only choice left to configuration is how ``update_test`` finds the record
    it overwrites (see ``UpdateLookup``).
    """

    __test__: ClassVar[bool] = False

    def __init__(self, store: TestStore, update_lookup: UpdateLookup = UpdateLookup.OWNER):
        self.store = store
        self.update_lookup = update_lookup

    async def list_tests(self, caller: UserId) -> list[Test]:
        """All tests authored by ``caller``, in store order."""
        return await self.store.list_by_author(caller)

    async def get_test(self, caller: UserId, test_id: TestId | str) -> Test:
        """
        Fetch one of the caller's tests.

        Raises:
            NotFoundError: No such test, or it belongs to another author
        """
        tid = _as_test_id(test_id)
        test = await self.store.find_by_author_and_id(caller, tid) if tid is not None else None
        if test is None:
            raise NotFoundError("Test not found")
        return test

    async def create_test(self, caller: UserId, payload: Test) -> Test:
        """
        Persist a new test owned by ``caller``.

        Author, questions and sessions from the payload are ignored.

        Raises:
            BadRequestError: Payload already carries an id (use update)
        """
        if not payload.is_new:
            logger.warning("Rejected create with id %s from %s", payload.id, caller)
            raise BadRequestError("Use PUT for update")

        saved = await self.store.save(payload.prepared_for(caller))
        logger.info("Created test %s for author %s", saved.id, caller)
        return saved

    async def update_test(self, caller: UserId, test_id: TestId | str | None, payload: Test) -> Test:
        """
        Overwrite name, duration and question count of an existing test.

        Args:
            caller: Authenticated user making the request
            test_id: Target test; required
            payload: Source of the revisable fields, everything else ignored

        Returns:
            The stored test after the update

        Raises:
            BadRequestError: ``test_id`` is missing (use create)
            NotFoundError: No test to update
        """
        tid = _as_test_id(test_id)
        if tid is None:
            logger.warning("Rejected update without test id from %s", caller)
            raise BadRequestError("Use POST for save")

        if self.update_lookup == UpdateLookup.ID:
            existing = await self.store.find_by_id(tid)
        else:
            existing = await self.store.find_by_author_and_id(caller, tid)
        if existing is None:
            raise NotFoundError("Test not found")

        saved = await self.store.save(existing.revised_with(payload))
        logger.info("Updated test %s (author %s) by %s", saved.id, saved.author_id, caller)
        return saved

    async def delete_test(self, caller: UserId, test_id: TestId | str) -> None:
        """Delete the caller's test; a missing test is not an error."""
        tid = _as_test_id(test_id)
        if tid is None:
            return
        await self.store.delete_by_author_and_id(caller, tid)
        logger.info("Delete of test %s processed for author %s", tid, caller)


def create_test_access_service(
    store: TestStore,
    update_lookup: UpdateLookup = UpdateLookup.OWNER,
) -> TestAccessService:
    """
    Factory function for creating TestAccessService.

    Service owns its own construction logic - deps.py just calls this.
    """
    return TestAccessService(store=store, update_lookup=update_lookup)


__all__ = ["TestAccessService", "create_test_access_service"]

"""
Shared test fixtures and configuration.

Settings are read at import time, so .env.test is loaded before anything from
the testsystem package is imported.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

ENV_FILE = Path(__file__).parent.parent / ".env.test"

load_dotenv(ENV_FILE, override=True)

from testsystem.domain.domain_type import UpdateLookup  # noqa: E402
from testsystem.domain.domain_value import TestId, UserId  # noqa: E402
from testsystem.domain.quiz import Test  # noqa: E402
from testsystem.service.quiz import TestAccessService  # noqa: E402
from testsystem.service.store import InMemoryTestStore  # noqa: E402


class RecordingTestStore(InMemoryTestStore):
    """In-memory store that records which primitives were called."""

    def __init__(self, tests: list[Test] | None = None):
        super().__init__(tests)
        self.calls: list[str] = []

    async def list_by_author(self, author_id: UserId) -> list[Test]:
        self.calls.append("list_by_author")
        return await super().list_by_author(author_id)

    async def find_by_author_and_id(self, author_id: UserId, test_id: TestId) -> Test | None:
        self.calls.append("find_by_author_and_id")
        return await super().find_by_author_and_id(author_id, test_id)

    async def find_by_id(self, test_id: TestId) -> Test | None:
        self.calls.append("find_by_id")
        return await super().find_by_id(test_id)

    async def save(self, test: Test) -> Test:
        self.calls.append("save")
        return await super().save(test)

    async def delete_by_author_and_id(self, author_id: UserId, test_id: TestId) -> None:
        self.calls.append("delete_by_author_and_id")
        await super().delete_by_author_and_id(author_id, test_id)


@pytest.fixture
def alice() -> UserId:
    return UserId("u1")


@pytest.fixture
def bob() -> UserId:
    return UserId("u2")


@pytest.fixture
def quiz_payload() -> Test:
    """Create-style payload: no id, no author."""
    return Test(name="Quiz1", duration_minutes=30, questions_number=5)


@pytest.fixture
def alice_test(alice: UserId) -> Test:
    """A stored test owned by alice with questions and sessions attached."""
    return Test(
        id=TestId("t-alice"),
        author_id=alice,
        name="Algebra",
        duration_minutes=20,
        questions_number=3,
        questions=("q1", "q2", "q3"),
        test_sessions=("s1",),
    )


@pytest.fixture
def bob_test(bob: UserId) -> Test:
    return Test(
        id=TestId("t-bob"),
        author_id=bob,
        name="History",
        duration_minutes=40,
        questions_number=10,
    )


@pytest.fixture
def store(alice_test: Test, bob_test: Test) -> RecordingTestStore:
    return RecordingTestStore([alice_test, bob_test])


@pytest.fixture
def service(store: RecordingTestStore) -> TestAccessService:
    return TestAccessService(store=store, update_lookup=UpdateLookup.OWNER)


@pytest.fixture
def legacy_service(store: RecordingTestStore) -> TestAccessService:
    """Service using the id-only update lookup."""
    return TestAccessService(store=store, update_lookup=UpdateLookup.ID)

"""
Tests for InMemoryTestStore.

The store is the fake used everywhere else, so its ownership scoping has to
match the Redis adapter's contract.
"""

import asyncio

import pytest

from testsystem.domain.domain_value import TestId, UserId
from testsystem.domain.quiz import Test
from testsystem.service.store import InMemoryTestStore


@pytest.mark.asyncio
async def test_save_assigns_id_on_insert(quiz_payload: Test, alice: UserId):
    store = InMemoryTestStore()

    saved = await store.save(quiz_payload.prepared_for(alice))

    assert saved.id is not None
    assert await store.find_by_id(saved.id) == saved


@pytest.mark.asyncio
async def test_save_with_id_replaces(alice_test: Test):
    store = InMemoryTestStore([alice_test])

    replaced = await store.save(alice_test.model_copy(update={"name": "Renamed"}))

    assert replaced.id == alice_test.id
    assert len(store) == 1
    assert (await store.find_by_id(alice_test.id)).name == "Renamed"


@pytest.mark.asyncio
async def test_find_by_author_and_id_hides_foreign_tests(alice_test: Test, bob: UserId):
    store = InMemoryTestStore([alice_test])

    assert await store.find_by_author_and_id(bob, alice_test.id) is None
    assert await store.find_by_author_and_id(alice_test.author_id, alice_test.id) == alice_test


@pytest.mark.asyncio
async def test_list_by_author_preserves_insertion_order(alice: UserId):
    tests = [
        Test(id=TestId(f"t{i}"), author_id=alice, name=f"Quiz {i}", duration_minutes=5, questions_number=i)
        for i in range(3)
    ]
    store = InMemoryTestStore(tests)

    assert [t.id for t in await store.list_by_author(alice)] == [t.id for t in tests]


@pytest.mark.asyncio
async def test_delete_ignores_other_authors(alice_test: Test, bob: UserId):
    store = InMemoryTestStore([alice_test])

    await store.delete_by_author_and_id(bob, alice_test.id)

    assert await store.find_by_id(alice_test.id) == alice_test


@pytest.mark.asyncio
async def test_concurrent_deletes_remove_once(alice_test: Test, bob_test: Test):
    store = InMemoryTestStore([alice_test, bob_test])

    await asyncio.gather(*(store.delete_by_author_and_id(alice_test.author_id, alice_test.id) for _ in range(5)))

    assert list(store.snapshot()) == [bob_test.id]

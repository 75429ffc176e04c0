"""Test Aggregate - Quiz Definitions Owned by a Single Author.

A Test is the definition of an assessment: its name, time limit and how many
questions a session draws. Questions and sessions are managed elsewhere; this
model only carries their references.

Every change is a pure value transformation. The create and update paths
build a new Test from an old one plus a small set of named overrides, and the
original instance is never touched.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .domain_value import TestId, UserId

# Fields a client may change on an existing Test
REVISABLE_FIELDS: tuple[str, ...] = ("name", "duration_minutes", "questions_number")


class Test(BaseModel):
    """Quiz Definition.

    Attributes:
        id: Store-assigned identifier, None until first saved
        author_id: Owner; always set server-side from the caller's identity
        name: Display name
        duration_minutes: Time limit for one session
        questions_number: Number of questions a session draws
        questions: Question references (read-only through the tests API)
        test_sessions: Session references (read-only through the tests API)

    Wire format uses camelCase (``authorId``, ``durationMinutes``...), while
    Python code uses the snake_case attribute names.
    """

    __test__: ClassVar[bool] = False

    id: TestId | None = None
    author_id: UserId | None = None
    name: str = Field(min_length=1, max_length=255)
    duration_minutes: int = Field(gt=0)
    questions_number: int = Field(ge=0)
    questions: tuple[str, ...] = ()
    test_sessions: tuple[str, ...] = ()

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_new(self) -> bool:
        return self.id is None

    def prepared_for(self, author_id: UserId) -> Test:
        """Copy for insertion: owned by ``author_id`` with no questions or sessions.

        Whatever the client sent for ``authorId``, ``questions`` or
        ``testSessions`` is discarded.
        """
        return self.model_copy(
            update={
                "author_id": author_id,
                "questions": (),
                "test_sessions": (),
            }
        )

    def revised_with(self, incoming: Test) -> Test:
        """Copy of this stored Test with the revisable fields taken from ``incoming``.

        ``id``, ``author_id``, ``questions`` and ``test_sessions`` are kept from
        ``self``.

        Example:
            >>> updated = stored.revised_with(payload)
            >>> updated.id == stored.id
            True
        """
        return self.model_copy(update={field: getattr(incoming, field) for field in REVISABLE_FIELDS})

    def with_id(self, test_id: TestId) -> Test:
        """Copy carrying a store-assigned identifier."""
        return self.model_copy(update={"id": test_id})

    def is_owned_by(self, author_id: UserId) -> bool:
        return self.author_id == author_id


__all__ = ["REVISABLE_FIELDS", "Test"]

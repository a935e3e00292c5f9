"""
Answer persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID, uuid4

from core import db
from core.errors import ForeignKeyViolation, parse_uuid
from core.records import Answer, utc_now

# Inserts nothing (and returns no row) when the question is missing.
INSERT_ANSWER = """
INSERT INTO answer (id, question_id, content, created_at)
SELECT $1::uuid, $2::uuid, $3::varchar, $4::timestamptz
WHERE EXISTS (SELECT 1 FROM question WHERE id = $2::uuid)
RETURNING id, question_id, content, created_at
"""

SELECT_ANSWERS = """
SELECT id, question_id, content, created_at
FROM answer
WHERE question_id = $1
ORDER BY created_at ASC, id ASC
"""

SELECT_ANSWER = """
SELECT id, question_id, content, created_at
FROM answer
WHERE id = $1
"""

DELETE_ANSWER = """
DELETE FROM answer
WHERE id = $1
"""


class AnswerStore:
    """Create, read and delete answers against the injected pool."""

    def __init__(self, pool: db.Pool) -> None:
        self._pool = pool

    async def create_answer(self, question_id: UUID | str, content: str) -> Answer:
        """
        Insert an answer for an existing question.

        Raises `ForeignKeyViolation` when the question does not exist, both
        when the guarded insert matches nothing and when a database-level
        foreign key rejects the row.
        """
        question_uuid = parse_uuid(question_id, field="question UUID")
        try:
            row = await db.fetch_one(
                self._pool,
                INSERT_ANSWER,
                uuid4(),
                question_uuid,
                content,
                utc_now(),
            )
        except ForeignKeyViolation as exc:
            raise ForeignKeyViolation(
                f"Invalid question UUID: {question_uuid}",
                question_id=question_uuid,
            ) from exc
        if row is None:
            raise ForeignKeyViolation(
                f"Invalid question UUID: {question_uuid}",
                question_id=question_uuid,
            )
        return Answer.from_row(row)

    async def list_answers(self, question_id: UUID | str) -> list[Answer]:
        """
        Answers of a question, oldest first. Unknown questions yield [].
        """
        rows = await db.fetch_all(
            self._pool,
            SELECT_ANSWERS,
            parse_uuid(question_id, field="question UUID"),
        )
        return [Answer.from_row(r) for r in rows]

    async def get_answer(self, answer_id: UUID | str) -> Answer | None:
        row = await db.fetch_one(
            self._pool,
            SELECT_ANSWER,
            parse_uuid(answer_id, field="answer UUID"),
        )
        return Answer.from_row(row) if row is not None else None

    async def delete_answer(self, answer_id: UUID | str) -> None:
        await db.execute(
            self._pool,
            DELETE_ANSWER,
            parse_uuid(answer_id, field="answer UUID"),
        )

"""
Question persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID, uuid4

from core import db
from core.errors import StorageError, parse_uuid
from core.records import Question, utc_now

INSERT_QUESTION = """
INSERT INTO question (id, title, description, created_at)
VALUES ($1, $2, $3, $4)
RETURNING id, title, description, created_at
"""

SELECT_QUESTIONS = """
SELECT id, title, description, created_at
FROM question
ORDER BY created_at ASC, id ASC
"""

SELECT_QUESTION = """
SELECT id, title, description, created_at
FROM question
WHERE id = $1
"""

DELETE_QUESTION = """
DELETE FROM question
WHERE id = $1
"""


class QuestionStore:
    """Create, read and delete questions against the injected pool."""

    def __init__(self, pool: db.Pool) -> None:
        self._pool = pool

    async def create_question(self, title: str, description: str) -> Question:
        """
        Insert a question with a fresh id and the current UTC timestamp.
        """
        row = await db.fetch_one(
            self._pool,
            INSERT_QUESTION,
            uuid4(),
            title,
            description,
            utc_now(),
        )
        if row is None:
            raise StorageError("Failed to create question.")
        return Question.from_row(row)

    async def list_questions(self) -> list[Question]:
        rows = await db.fetch_all(self._pool, SELECT_QUESTIONS)
        return [Question.from_row(r) for r in rows]

    async def get_question(self, question_id: UUID | str) -> Question | None:
        row = await db.fetch_one(
            self._pool,
            SELECT_QUESTION,
            parse_uuid(question_id, field="question UUID"),
        )
        return Question.from_row(row) if row is not None else None

    async def delete_question(self, question_id: UUID | str) -> None:
        """
        Delete by id. A missing id is not an error; answers are left in place.
        """
        await db.execute(
            self._pool,
            DELETE_QUESTION,
            parse_uuid(question_id, field="question UUID"),
        )

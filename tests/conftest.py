"""
Shared fixtures for the test suite.

`FakePool` stands in for an asyncpg pool: it answers the exact statements the
stores issue from two in-memory tables, so the real store code (SQL dispatch,
row mapping, error classification) runs without a PostgreSQL server.
"""

from __future__ import annotations

from typing import Any

import asyncpg
import pytest
from fastapi.testclient import TestClient

from answers import repository as answer_repository
from answers.repository import AnswerStore
from core import db, schema
from main import app
from questions import repository as question_repository
from questions.repository import QuestionStore

MAX_TEXT = 255


class FakePool:
    def __init__(self) -> None:
        self.questions: dict[Any, dict[str, Any]] = {}
        self.answers: dict[Any, dict[str, Any]] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._failures: list[BaseException] = []
        self._handlers = {
            question_repository.INSERT_QUESTION: self._insert_question,
            question_repository.SELECT_QUESTIONS: self._select_questions,
            question_repository.SELECT_QUESTION: self._select_question,
            question_repository.DELETE_QUESTION: self._delete_question,
            answer_repository.INSERT_ANSWER: self._insert_answer,
            answer_repository.SELECT_ANSWERS: self._select_answers,
            answer_repository.SELECT_ANSWER: self._select_answer,
            answer_repository.DELETE_ANSWER: self._delete_answer,
            schema.SCHEMA_SQL: lambda: "CREATE TABLE",
        }

    def fail_next(self, exc: BaseException) -> None:
        self._failures.append(exc)

    def _run(self, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((sql, args))
        if self._failures:
            raise self._failures.pop(0)
        handler = self._handlers.get(sql)
        if handler is None:
            raise AssertionError(f"unexpected SQL: {sql!r}")
        return handler(*args)

    async def fetchrow(self, query: str, *args: Any) -> Any:
        return self._run(query, args)

    async def fetch(self, query: str, *args: Any) -> list[Any]:
        return self._run(query, args)

    async def execute(self, query: str, *args: Any) -> str:
        return self._run(query, args)

    @staticmethod
    def _check_length(*values: str) -> None:
        for value in values:
            if len(value) > MAX_TEXT:
                raise asyncpg.exceptions.StringDataRightTruncationError(
                    "value too long for type character varying(255)"
                )

    def _insert_question(self, question_id, title, description, created_at):
        self._check_length(title, description)
        if question_id in self.questions:
            raise asyncpg.exceptions.UniqueViolationError('duplicate key value violates "question_pkey"')
        row = {"id": question_id, "title": title, "description": description, "created_at": created_at}
        self.questions[question_id] = row
        return dict(row)

    def _select_questions(self):
        rows = sorted(self.questions.values(), key=lambda r: (r["created_at"], str(r["id"])))
        return [dict(r) for r in rows]

    def _select_question(self, question_id):
        row = self.questions.get(question_id)
        return dict(row) if row is not None else None

    def _delete_question(self, question_id):
        removed = self.questions.pop(question_id, None)
        return f"DELETE {0 if removed is None else 1}"

    def _insert_answer(self, answer_id, question_id, content, created_at):
        self._check_length(content)
        if question_id not in self.questions:
            return None
        row = {"id": answer_id, "question_id": question_id, "content": content, "created_at": created_at}
        self.answers[answer_id] = row
        return dict(row)

    def _select_answers(self, question_id):
        rows = [r for r in self.answers.values() if r["question_id"] == question_id]
        rows.sort(key=lambda r: (r["created_at"], str(r["id"])))
        return [dict(r) for r in rows]

    def _select_answer(self, answer_id):
        row = self.answers.get(answer_id)
        return dict(row) if row is not None else None

    def _delete_answer(self, answer_id):
        removed = self.answers.pop(answer_id, None)
        return f"DELETE {0 if removed is None else 1}"


@pytest.fixture
def pool() -> FakePool:
    return FakePool()


@pytest.fixture
def question_store(pool: FakePool) -> QuestionStore:
    return QuestionStore(pool)


@pytest.fixture
def answer_store(pool: FakePool) -> AnswerStore:
    return AnswerStore(pool)


@pytest.fixture
def client(pool: FakePool):
    # No `with`: the lifespan (which would dial PostgreSQL) does not run.
    app.dependency_overrides[db.get_pool] = lambda: pool
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

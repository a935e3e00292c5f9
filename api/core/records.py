"""
Record types returned by the stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping
from uuid import UUID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Question:
    id: UUID
    title: str
    description: str
    created_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Question":
        return cls(
            id=row["id"],
            title=str(row["title"]),
            description=str(row["description"]),
            created_at=row["created_at"],
        )


@dataclass(frozen=True)
class Answer:
    id: UUID
    question_id: UUID
    content: str
    created_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Answer":
        return cls(
            id=row["id"],
            question_id=row["question_id"],
            content=str(row["content"]),
            created_at=row["created_at"],
        )

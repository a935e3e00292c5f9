"""
Question API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from core.records import Question


class QuestionCreate(BaseModel):
    title: str = Field(..., max_length=255)
    description: str = Field(..., max_length=255)


class QuestionId(BaseModel):
    # Parsed by the store so a bad id surfaces as a 400, not a 422.
    question_uuid: str = Field(..., max_length=64)


class QuestionDetail(BaseModel):
    question_uuid: UUID
    title: str
    description: str
    created_at: datetime

    @classmethod
    def from_record(cls, question: Question) -> "QuestionDetail":
        return cls(
            question_uuid=question.id,
            title=question.title,
            description=question.description,
            created_at=question.created_at,
        )

"""
Answer API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from core.records import Answer


class AnswerCreate(BaseModel):
    question_uuid: str = Field(..., max_length=64)
    content: str = Field(..., max_length=255)


class AnswerId(BaseModel):
    answer_uuid: str = Field(..., max_length=64)


class AnswerDetail(BaseModel):
    answer_uuid: UUID
    question_uuid: UUID
    content: str
    created_at: datetime

    @classmethod
    def from_record(cls, answer: Answer) -> "AnswerDetail":
        return cls(
            answer_uuid=answer.id,
            question_uuid=answer.question_id,
            content=answer.content,
            created_at=answer.created_at,
        )

"""
Question API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core import db

from . import schemas
from .repository import QuestionStore

router = APIRouter()


def get_question_store(pool: db.Pool = Depends(db.get_pool)) -> QuestionStore:
    return QuestionStore(pool)


@router.post("/question")
async def create_question(
    request: schemas.QuestionCreate,
    store: QuestionStore = Depends(get_question_store),
) -> schemas.QuestionDetail:
    question = await store.create_question(request.title, request.description)
    return schemas.QuestionDetail.from_record(question)


@router.get("/questions")
async def read_questions(
    store: QuestionStore = Depends(get_question_store),
) -> list[schemas.QuestionDetail]:
    questions = await store.list_questions()
    return [schemas.QuestionDetail.from_record(q) for q in questions]


@router.delete("/question", response_class=Response)
async def delete_question(
    request: schemas.QuestionId,
    store: QuestionStore = Depends(get_question_store),
) -> Response:
    """
    Always 200 with an empty body, whether or not the question existed.
    """
    await store.delete_question(request.question_uuid)
    return Response(status_code=status.HTTP_200_OK)

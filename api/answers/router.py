"""
Answer API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Query, Response, status

from core import db
from core.errors import ValidationError
from questions.schemas import QuestionId

from . import schemas
from .repository import AnswerStore

router = APIRouter()


def get_answer_store(pool: db.Pool = Depends(db.get_pool)) -> AnswerStore:
    return AnswerStore(pool)


@router.post("/answer")
async def create_answer(
    request: schemas.AnswerCreate,
    store: AnswerStore = Depends(get_answer_store),
) -> schemas.AnswerDetail:
    answer = await store.create_answer(request.question_uuid, request.content)
    return schemas.AnswerDetail.from_record(answer)


@router.get("/answers")
async def read_answers(
    request: QuestionId | None = Body(default=None),
    question_uuid: str | None = Query(default=None, max_length=64),
    store: AnswerStore = Depends(get_answer_store),
) -> list[schemas.AnswerDetail]:
    """
    The question id comes in a JSON body (`{"question_uuid": ...}`) or, for
    clients that cannot send a body with GET, as `?question_uuid=`.
    """
    target = request.question_uuid if request is not None else question_uuid
    if not target:
        raise ValidationError("question_uuid is required.")
    answers = await store.list_answers(target)
    return [schemas.AnswerDetail.from_record(a) for a in answers]


@router.delete("/answer", response_class=Response)
async def delete_answer(
    request: schemas.AnswerId,
    store: AnswerStore = Depends(get_answer_store),
) -> Response:
    await store.delete_answer(request.answer_uuid)
    return Response(status_code=status.HTTP_200_OK)

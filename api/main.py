from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from answers import router as answers_router
from core import db, errors, schema
from core.log import configure_logging
from questions import router as questions_router

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong! Please try again."


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared read-only by every request.
    configure_logging()
    pool = await db.create_pool()
    logger.info("db_pool_open min_size=%s max_size=%s", db.pool_min_size(), db.pool_max_size())
    try:
        if db.create_schema_on_startup():
            await schema.create_schema(pool)
        app.state.pool = pool
        yield
    finally:
        app.state.pool = None
        await db.close_pool(pool)
        logger.info("db_pool_closed")


app = FastAPI(lifespan=lifespan)

app.include_router(questions_router.router, tags=["questions"])
app.include_router(answers_router.router, tags=["answers"])


@app.exception_handler(errors.ValidationError)
async def validation_error_handler(request: Request, exc: errors.ValidationError) -> PlainTextResponse:
    logger.warning("bad_request path=%s detail=%s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(errors.ForeignKeyViolation)
async def foreign_key_violation_handler(
    request: Request,
    exc: errors.ForeignKeyViolation,
) -> PlainTextResponse:
    logger.warning("foreign_key_violation path=%s question_id=%s", request.url.path, exc.question_id)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(errors.StorageError)
async def storage_error_handler(request: Request, exc: errors.StorageError) -> PlainTextResponse:
    logger.error("storage_error path=%s detail=%s", request.url.path, exc, exc_info=exc)
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def serve() -> None:
    host = os.environ.get("API_HOST", "127.0.0.1").strip() or "127.0.0.1"
    port = _env_int("API_PORT", 8000)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()

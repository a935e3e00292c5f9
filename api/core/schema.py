"""
Creates the `question` and `answer` tables if they do not already exist.

Runs on startup unless DB_CREATE_SCHEMA is off. To initialize a fresh database
by hand (from the `api/` directory):
    python -m core.schema
"""

from __future__ import annotations

import asyncio
import logging

from . import db
from .log import configure_logging

logger = logging.getLogger(__name__)

# answer.question_id is checked by the answer store's guarded insert instead of
# a REFERENCES clause: deleting a question must leave its answers in place.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS question (
    id              UUID PRIMARY KEY,
    title           VARCHAR(255) NOT NULL,
    description     VARCHAR(255) NOT NULL,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS question_created_at_idx ON question (created_at);

CREATE TABLE IF NOT EXISTS answer (
    id              UUID PRIMARY KEY,
    question_id     UUID NOT NULL,
    content         VARCHAR(255) NOT NULL,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS answer_question_id_idx ON answer (question_id, created_at);
"""


async def create_schema(pool: db.Pool) -> None:
    await db.execute(pool, SCHEMA_SQL)
    logger.info("schema_ready tables=question,answer")


async def _main() -> None:
    pool = await db.create_pool()
    try:
        await create_schema(pool)
    finally:
        await db.close_pool(pool)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(_main())

"""
Async database access helpers (raw SQL) using asyncpg.

This module builds the connection pool. FastAPI creates it in the lifespan hook
(see `api/main.py`), keeps it on `app.state.pool` and hands it to the stores
through `get_pool`. Stores never reach for a module-level pool.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every helper here runs a single statement through the pool, which acquires a
connection and gives it back on success and on failure. Driver errors are
re-raised as `core.errors.StorageError` (or `ForeignKeyViolation`).
"""

from __future__ import annotations

import asyncio
import os
from typing import Any, Protocol
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import errors

# Failures that mean "the database did not do what we asked".
DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class Pool(Protocol):
    """The slice of `asyncpg.Pool` the stores rely on."""

    async def fetchrow(self, query: str, *args: Any) -> Any: ...

    async def fetch(self, query: str, *args: Any) -> list[Any]: ...

    async def execute(self, query: str, *args: Any) -> str: ...


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), 1)


def command_timeout_s() -> int:
    return _env_int("DB_COMMAND_TIMEOUT_S", 30)


def create_schema_on_startup() -> bool:
    raw = os.environ.get("DB_CREATE_SCHEMA", "true").strip().lower()
    return raw not in {"0", "false", "no", "off"}


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    min_size = pool_min_size()
    return await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=min_size,
        max_size=max(pool_max_size(), min_size),
        command_timeout=command_timeout_s(),
    )


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


def get_pool(request: Request) -> Pool:
    """
    FastAPI dependency: the pool opened by the app lifespan.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. Start the app through its lifespan.")
    return pool


def _storage_error(exc: BaseException) -> errors.StorageError:
    if isinstance(exc, asyncpg.exceptions.ForeignKeyViolationError):
        return errors.ForeignKeyViolation(str(exc) or "Foreign key violation.")
    detail = str(exc).strip() or type(exc).__name__
    return errors.StorageError(f"Database operation failed: {detail}")


async def fetch_one(pool: Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except DRIVER_ERRORS as exc:
        raise _storage_error(exc) from exc
    return dict(row) if row is not None else None


async def fetch_all(pool: Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except DRIVER_ERRORS as exc:
        raise _storage_error(exc) from exc
    return [dict(r) for r in rows]


async def execute(pool: Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/DELETE/DDL). Returns the command status tag.
    """
    try:
        return await pool.execute(sql, *args)
    except DRIVER_ERRORS as exc:
        raise _storage_error(exc) from exc

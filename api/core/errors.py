"""
Error taxonomy shared by the stores and the HTTP layer.

The stores raise these; `main.py` maps them to status codes.
"""

from __future__ import annotations

from uuid import UUID


class QAError(RuntimeError):
    pass


class ValidationError(QAError):
    """Input that is malformed before it ever reaches SQL."""


class StorageError(QAError):
    """Any failure of the database layer."""


class ForeignKeyViolation(StorageError):
    """An answer points at a question that does not exist."""

    def __init__(self, message: str, *, question_id: UUID | None = None) -> None:
        super().__init__(message)
        self.question_id = question_id


def parse_uuid(value: UUID | str, *, field: str = "id") -> UUID:
    if isinstance(value, UUID):
        return value
    raw = (value or "").strip() if isinstance(value, str) else ""
    try:
        return UUID(raw)
    except ValueError as exc:
        raise ValidationError(f"Could not parse {field}: {value!r}") from exc

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from agromano.application.errors import AppError, DuplicateError, ValidationError

MISSING_REFERENCE = "El registro referenciado no existe"
CONSTRAINT_VIOLATED = "Los datos no cumplen las restricciones del registro"


def translate_integrity_error(
    exc: IntegrityError, duplicate_message: str | None = None
) -> AppError:
    """Map a constraint violation raised on flush to the matching application error.

    SQLite reports ``FOREIGN KEY constraint failed`` and Postgres
    ``violates foreign key constraint``; both contain "foreign key".
    """
    detail = str(exc.orig).lower()
    if duplicate_message and ("unique" in detail or "duplicate key" in detail):
        return DuplicateError(duplicate_message)
    if "foreign key" in detail:
        return ValidationError(MISSING_REFERENCE)
    return ValidationError(CONSTRAINT_VIOLATED)

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from agromano.application.errors import DuplicateError, ValidationError
from agromano.infrastructure.repos.integrity import (
    CONSTRAINT_VIOLATED,
    MISSING_REFERENCE,
    translate_integrity_error,
)

DUPLICADO = "El NIF ya está en uso"


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO titular ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message",
    [
        "UNIQUE constraint failed: titular.nif",
        'duplicate key value violates unique constraint "ux_titular_nif"',
    ],
)
def test_unique_violation_is_duplicate(message):
    error = translate_integrity_error(_integrity_error(message), DUPLICADO)
    assert isinstance(error, DuplicateError)
    assert error.message == DUPLICADO


@pytest.mark.parametrize(
    "message",
    [
        "FOREIGN KEY constraint failed",
        'insert or update on table "animal" violates foreign key constraint "fk_animal"',
    ],
)
def test_foreign_key_violation_is_missing_reference(message):
    error = translate_integrity_error(_integrity_error(message), DUPLICADO)
    assert isinstance(error, ValidationError)
    assert error.message == MISSING_REFERENCE


def test_other_constraints_get_generic_message():
    error = translate_integrity_error(
        _integrity_error('null value in column "nif" violates not-null constraint'), DUPLICADO
    )
    assert isinstance(error, ValidationError)
    assert error.message == CONSTRAINT_VIOLATED


def test_unique_violation_without_duplicate_message_is_generic():
    error = translate_integrity_error(_integrity_error("UNIQUE constraint failed: sesion.id"))
    assert error.message == CONSTRAINT_VIOLATED

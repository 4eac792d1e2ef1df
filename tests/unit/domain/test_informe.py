from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from agromano.domain.models.informe import DateRange
from agromano.domain.models.sesion import Sesion


def test_date_range_is_inclusive():
    rango = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
    assert rango.contains(date(2024, 1, 1))
    assert rango.contains(date(2024, 1, 31))
    assert not rango.contains(date(2023, 12, 31))
    assert not rango.contains(date(2024, 2, 1))


def test_date_range_excludes_undated_records():
    rango = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
    assert not rango.contains(None)


def test_sesion_expiry_handles_naive_timestamps():
    sesion = Sesion.create(id_usuario=1, expires_in_minutes=5)
    assert not sesion.is_expired()

    past = datetime.now(timezone.utc) - timedelta(minutes=1)
    sesion.expires_at = past.replace(tzinfo=None)
    assert sesion.is_expired()

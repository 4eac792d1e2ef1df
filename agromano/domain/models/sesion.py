from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Sesion:
    """Server-side login record. The session cookie carries a signed reference to `id`."""

    id: UUID
    id_usuario: int
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, id_usuario: int, expires_in_minutes: int) -> Sesion:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            id_usuario=id_usuario,
            created_at=now,
            expires_at=now + timedelta(minutes=expires_in_minutes),
        )

    def is_expired(self) -> bool:
        expires_at = self.expires_at
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) > expires_at

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class MovimientoORM(Base):
    __tablename__ = "movimiento"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tipo: Mapped[str] = mapped_column(String(32), nullable=False)  # entrada | salida
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    motivo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    procedencia_destino: Mapped[str | None] = mapped_column(String(255), nullable=True)
    id_animal: Mapped[int] = mapped_column(
        Integer, ForeignKey("animal.id", ondelete="CASCADE"), nullable=False, index=True
    )

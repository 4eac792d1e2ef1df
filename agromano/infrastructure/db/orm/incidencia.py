from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class IncidenciaORM(Base):
    __tablename__ = "incidencia"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Only set on reidentifications
    codigo_anterior: Mapped[str | None] = mapped_column(String(64), nullable=True)
    codigo_actual: Mapped[str | None] = mapped_column(String(64), nullable=True)
    id_animal: Mapped[int] = mapped_column(
        Integer, ForeignKey("animal.id", ondelete="CASCADE"), nullable=False, index=True
    )

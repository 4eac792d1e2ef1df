from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class VacunacionORM(Base):
    __tablename__ = "vacunacion"
    __table_args__ = (
        UniqueConstraint(
            "fecha", "tipo", "id_explotacion", name="ux_vacunacion_fecha_tipo_explotacion"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    tipo: Mapped[str] = mapped_column(String(128), nullable=False)
    dosis: Mapped[str | None] = mapped_column(String(64), nullable=True)
    nombre_comercial: Mapped[str | None] = mapped_column(String(255), nullable=True)
    veterinario: Mapped[str | None] = mapped_column(String(255), nullable=True)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )


class VacunacionAnimalORM(Base):
    __tablename__ = "vacunacion_animal"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_vacunacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("vacunacion.id", ondelete="CASCADE"), nullable=False, index=True
    )
    id_animal: Mapped[int] = mapped_column(
        Integer, ForeignKey("animal.id", ondelete="CASCADE"), nullable=False, index=True
    )

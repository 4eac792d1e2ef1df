from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animal"
    __table_args__ = (UniqueConstraint("identificacion", name="ux_animal_identificacion"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identificacion: Mapped[str] = mapped_column(String(64), nullable=False)
    especie: Mapped[str | None] = mapped_column(String(64), nullable=True)
    estado: Mapped[str | None] = mapped_column(String(64), nullable=True)
    fecha_nacimiento: Mapped[date | None] = mapped_column(Date, nullable=True)
    fecha_alta: Mapped[date | None] = mapped_column(Date, nullable=True)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )

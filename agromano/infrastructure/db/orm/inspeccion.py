from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class InspeccionORM(Base):
    __tablename__ = "inspeccion"
    __table_args__ = (
        UniqueConstraint("numero_acta", "id_explotacion", name="ux_inspeccion_acta_explotacion"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    oficial: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tipo: Mapped[str | None] = mapped_column(String(128), nullable=True)
    numero_acta: Mapped[str] = mapped_column(String(64), nullable=False)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )

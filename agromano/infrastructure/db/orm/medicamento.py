from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class MedicamentoORM(Base):
    __tablename__ = "medicamento"
    __table_args__ = (
        UniqueConstraint("factura", "id_explotacion", name="ux_medicamento_factura_explotacion"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    receta: Mapped[str | None] = mapped_column(String(128), nullable=True)
    medicamento: Mapped[str] = mapped_column(String(255), nullable=False)
    factura: Mapped[str] = mapped_column(String(64), nullable=False)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )

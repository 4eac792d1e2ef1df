from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class AlimentacionORM(Base):
    __tablename__ = "alimentacion"
    __table_args__ = (
        UniqueConstraint("factura", "id_explotacion", name="ux_alimentacion_factura_explotacion"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    tipo: Mapped[str] = mapped_column(String(128), nullable=False)
    # Kilograms
    cantidad: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    lote: Mapped[str | None] = mapped_column(String(64), nullable=True)
    factura: Mapped[str] = mapped_column(String(64), nullable=False)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )

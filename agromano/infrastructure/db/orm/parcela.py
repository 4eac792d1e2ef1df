from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class ParcelaORM(Base):
    __tablename__ = "parcela"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    coordenadas: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Hectares
    extension: Mapped[float | None] = mapped_column(Numeric(12, 4, asdecimal=False), nullable=True)
    id_explotacion: Mapped[int] = mapped_column(
        Integer, ForeignKey("explotacion.id", ondelete="CASCADE"), nullable=False, index=True
    )

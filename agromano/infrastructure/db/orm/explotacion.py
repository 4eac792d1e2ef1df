from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class ExplotacionORM(Base):
    __tablename__ = "explotacion"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    codigo: Mapped[str] = mapped_column(String(64), nullable=False)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    direccion: Mapped[str | None] = mapped_column(String(255), nullable=True)
    localidad: Mapped[str | None] = mapped_column(String(128), nullable=True)
    provincia: Mapped[str | None] = mapped_column(String(128), nullable=True)
    codigo_postal: Mapped[str | None] = mapped_column(String(16), nullable=True)
    especies: Mapped[str | None] = mapped_column(String(255), nullable=True)
    coordenadas: Mapped[str | None] = mapped_column(String(255), nullable=True)
    id_titular: Mapped[int] = mapped_column(
        Integer, ForeignKey("titular.id", ondelete="CASCADE"), nullable=False, index=True
    )

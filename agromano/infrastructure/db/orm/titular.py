from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from agromano.infrastructure.db.base import Base


class TitularORM(Base):
    __tablename__ = "titular"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    nif: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    domicilio: Mapped[str | None] = mapped_column(String(255), nullable=True)
    localidad: Mapped[str | None] = mapped_column(String(128), nullable=True)
    provincia: Mapped[str | None] = mapped_column(String(128), nullable=True)
    codigo_postal: Mapped[str | None] = mapped_column(String(16), nullable=True)
    telefono: Mapped[str | None] = mapped_column(String(32), nullable=True)
    id_usuario: Mapped[int] = mapped_column(
        Integer, ForeignKey("usuario.id", ondelete="CASCADE"), nullable=False, index=True
    )

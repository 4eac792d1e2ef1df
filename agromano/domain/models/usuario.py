from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Usuario:
    id: int | None
    nombre_usuario: str
    email: str
    contrasena_hash: str
    nombre_empresa: str | None = None

    @classmethod
    def create(
        cls,
        *,
        nombre_usuario: str,
        email: str,
        contrasena_hash: str,
        nombre_empresa: str | None = None,
    ) -> Usuario:
        return cls(
            id=None,
            nombre_usuario=nombre_usuario,
            email=email.lower(),
            contrasena_hash=contrasena_hash,
            nombre_empresa=nombre_empresa,
        )

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from agromano.domain.models.vacunacion import Vacunacion, VacunacionAnimal


class VacunacionesRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Vacunacion], int]: ...
    async def get(self, vacunacion_id: int) -> Vacunacion | None: ...
    async def get_by_pareja(
        self, fecha: date, tipo: str, id_explotacion: int
    ) -> Vacunacion | None: ...
    async def add(self, vacunacion: Vacunacion) -> Vacunacion: ...
    async def update(self, vacunacion_id: int, data: dict) -> Vacunacion | None: ...
    async def delete(self, vacunacion_id: int) -> bool: ...
    async def list_for_animales(
        self, animal_ids: Sequence[int]
    ) -> list[tuple[int, Vacunacion]]: ...


class VacunacionesAnimalRepository(Protocol):
    async def list(
        self,
        *,
        id_vacunacion: int | None = None,
        id_animal: int | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[VacunacionAnimal], int]: ...
    async def get(self, link_id: int) -> VacunacionAnimal | None: ...
    async def add(self, link: VacunacionAnimal) -> VacunacionAnimal: ...
    async def update(self, link_id: int, data: dict) -> VacunacionAnimal | None: ...
    async def delete(self, link_id: int) -> bool: ...

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agromano.application.interfaces.unit_of_work import UnitOfWork

REPOSITORY_NAMES = (
    "usuarios",
    "sesiones",
    "titulares",
    "explotaciones",
    "parcelas",
    "animales",
    "movimientos",
    "incidencias",
    "alimentaciones",
    "medicamentos",
    "vacunaciones",
    "vacunaciones_animal",
    "inspecciones",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._clear_repositories()

    def _clear_repositories(self) -> None:
        for name in REPOSITORY_NAMES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from agromano.infrastructure.repos.alimentaciones_sqlalchemy import (
            AlimentacionesSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.animales_sqlalchemy import AnimalesSQLAlchemyRepository
        from agromano.infrastructure.repos.explotaciones_sqlalchemy import (
            ExplotacionesSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.incidencias_sqlalchemy import (
            IncidenciasSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.inspecciones_sqlalchemy import (
            InspeccionesSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.medicamentos_sqlalchemy import (
            MedicamentosSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.movimientos_sqlalchemy import (
            MovimientosSQLAlchemyRepository,
        )
        from agromano.infrastructure.repos.parcelas_sqlalchemy import ParcelasSQLAlchemyRepository
        from agromano.infrastructure.repos.sesiones_sqlalchemy import SesionesSQLAlchemyRepository
        from agromano.infrastructure.repos.titulares_sqlalchemy import TitularesSQLAlchemyRepository
        from agromano.infrastructure.repos.usuarios_sqlalchemy import UsuariosSQLAlchemyRepository
        from agromano.infrastructure.repos.vacunaciones_sqlalchemy import (
            VacunacionesAnimalSQLAlchemyRepository,
            VacunacionesSQLAlchemyRepository,
        )

        self.usuarios = UsuariosSQLAlchemyRepository(self.session)
        self.sesiones = SesionesSQLAlchemyRepository(self.session)
        self.titulares = TitularesSQLAlchemyRepository(self.session)
        self.explotaciones = ExplotacionesSQLAlchemyRepository(self.session)
        self.parcelas = ParcelasSQLAlchemyRepository(self.session)
        self.animales = AnimalesSQLAlchemyRepository(self.session)
        self.movimientos = MovimientosSQLAlchemyRepository(self.session)
        self.incidencias = IncidenciasSQLAlchemyRepository(self.session)
        self.alimentaciones = AlimentacionesSQLAlchemyRepository(self.session)
        self.medicamentos = MedicamentosSQLAlchemyRepository(self.session)
        self.vacunaciones = VacunacionesSQLAlchemyRepository(self.session)
        self.vacunaciones_animal = VacunacionesAnimalSQLAlchemyRepository(self.session)
        self.inspecciones = InspeccionesSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._clear_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()

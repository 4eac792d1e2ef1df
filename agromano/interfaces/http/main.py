from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agromano.config.settings import Settings, get_settings
from agromano.infrastructure.auth.password import PasswordHasher
from agromano.infrastructure.auth.session_tokens import SessionTokenService
from agromano.infrastructure.db.session import create_engine, create_session_factory
from agromano.infrastructure.reports.report_service import TitularReportService
from agromano.infrastructure.services.chatbot_service import ChatbotService
from agromano.interfaces.http.deps import get_app_settings
from agromano.interfaces.http.routers import (
    alimentaciones,
    animales,
    chatbot,
    explotaciones,
    incidencias,
    inspecciones,
    medicamentos,
    movimientos,
    parcelas,
    titulares,
    usuarios,
    vacunaciones,
    vacunaciones_animal,
)
from agromano.interfaces.http.routers import auth as auth_router
from agromano.interfaces.middleware.auth_middleware import AuthMiddleware
from agromano.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def _build_chatbot(settings: Settings) -> ChatbotService | None:
    if settings.openai_api_key is None:
        logger.warning("OPENAI_API_KEY not set; /api/chatbot will answer 503")
        return None
    return ChatbotService(
        api_key=settings.openai_api_key.get_secret_value(), model=settings.chatbot_model
    )


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
    session_tokens: SessionTokenService | None = None,
    chatbot_service: ChatbotService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Agromano Backend",
        version="0.1.0",
        description="API de gestión de explotaciones ganaderas",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.password_hasher = password_hasher or PasswordHasher()
    app.state.session_tokens = session_tokens or SessionTokenService(
        secret_key=settings.session_secret_key.get_secret_value(),
        algorithm=settings.session_algorithm,
        expires_minutes=settings.session_expires_minutes,
    )
    app.state.report_service = TitularReportService()
    app.state.chatbot_service = chatbot_service or _build_chatbot(settings)
    register_error_handlers(app)

    api = APIRouter(prefix="/api")
    api.include_router(auth_router.router)
    api.include_router(usuarios.router)
    api.include_router(titulares.router)
    api.include_router(explotaciones.router)
    api.include_router(parcelas.router)
    api.include_router(animales.router)
    api.include_router(movimientos.router)
    api.include_router(incidencias.router)
    api.include_router(alimentaciones.router)
    api.include_router(medicamentos.router)
    api.include_router(vacunaciones.router)
    api.include_router(vacunaciones_animal.router)
    api.include_router(inspecciones.router)
    api.include_router(chatbot.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    # Add Auth first, then CORS last so CORS runs outermost and can handle preflight OPTIONS
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count", "Content-Disposition"],
    )
    return app


app = create_app()

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from agromano.application.errors import AuthError, ServiceUnavailable
from agromano.config.settings import Settings
from agromano.infrastructure.auth.context import AuthContext
from agromano.infrastructure.auth.password import PasswordHasher
from agromano.infrastructure.auth.session_tokens import SessionTokenService
from agromano.infrastructure.db.session import SQLAlchemyUnitOfWork
from agromano.infrastructure.reports.pdf_generator import PDFGenerator
from agromano.infrastructure.reports.report_service import TitularReportService
from agromano.infrastructure.services.chatbot_service import ChatbotService


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Autenticación requerida")
    return context


async def get_optional_auth_context(request: Request) -> AuthContext | None:
    return getattr(request.state, "auth_context", None)


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_session_tokens(request: Request) -> SessionTokenService:
    service = getattr(request.app.state, "session_tokens", None)
    if service is None:
        raise RuntimeError("Session token service not configured")
    return service


def get_report_service(request: Request) -> TitularReportService:
    return request.app.state.report_service


def get_pdf_generator() -> PDFGenerator:
    # Stylesheets are mutated on setup, so each document gets its own generator
    return PDFGenerator()


def get_chatbot_service(request: Request) -> ChatbotService:
    service = getattr(request.app.state, "chatbot_service", None)
    if service is None:
        raise ServiceUnavailable("El chatbot no está configurado")
    return service

from typing import Annotated

from fastapi import Depends, Query, Request

from staychill.config import Settings
from staychill.schemas.location import Language
from staychill.schemas.views import ViewContext
from staychill.services.backend import BackendService
from staychill.services.payment import PaymentProcessor
from staychill.sessions import PaymentSessionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_backend_service(request: Request) -> BackendService:
    return request.app.state.backend_service


def get_payment_processor(request: Request) -> PaymentProcessor | None:
    return getattr(request.app.state, "payment_processor", None)


def get_session_store(request: Request) -> PaymentSessionStore:
    return request.app.state.session_store


def get_view_context(
    request: Request,
    lang: Annotated[Language | None, Query()] = None,
) -> ViewContext:
    return ViewContext(language=lang or request.app.state.settings.default_language)


SettingsDep = Annotated[Settings, Depends(get_settings)]
BackendDep = Annotated[BackendService, Depends(get_backend_service)]
ProcessorDep = Annotated[PaymentProcessor | None, Depends(get_payment_processor)]
SessionStoreDep = Annotated[PaymentSessionStore, Depends(get_session_store)]
ViewContextDep = Annotated[ViewContext, Depends(get_view_context)]

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from ventas.application.exceptions import (
    AuthError,
    CartFrozenError,
    NetworkError,
    ServerRejected,
    SessionExpired,
    ValidationError,
)
from ventas.core.config import settings
from ventas.wiring.dependencies import get_container

logger = logging.getLogger(__name__)


async def session_expired_handler(request: Request, exc: SessionExpired):
    # A stale 401 leaves a newer session in place; the request just has to be retried
    if not exc.invalidated and get_container().session.is_authenticated():
        logger.info("Stale unauthorized response, session kept", extra={"path": request.url.path})
        return JSONResponse(status_code=409, content={"detail": "Session changed while the request was in flight, retry it"})
    return RedirectResponse(settings.LOGIN_PATH, status_code=303)


async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(status_code=401, content={"detail": exc.message})


async def cart_frozen_handler(request: Request, exc: CartFrozenError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def server_rejected_handler(request: Request, exc: ServerRejected):
    return JSONResponse(
        status_code=502,
        content={"detail": str(exc), "upstream_status": exc.status_code, "errors": exc.field_errors},
    )


async def network_error_handler(request: Request, exc: NetworkError):
    logger.warning("Backend unreachable while serving request", extra={"path": request.url.path})
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SessionExpired, session_expired_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(CartFrozenError, cart_frozen_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ServerRejected, server_rejected_handler)
    app.add_exception_handler(NetworkError, network_error_handler)

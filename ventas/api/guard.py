from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse

from ventas.core.config import settings
from ventas.domain.routing import decide
from ventas.wiring.dependencies import get_container

logger = logging.getLogger(__name__)


async def route_guard(request: Request, call_next):
    """Apply the route decision to every request before it reaches a router."""
    session_present = get_container().session.is_authenticated()
    decision = decide(
        request.url.path,
        session_present,
        login_path=settings.LOGIN_PATH,
        protected_prefix=settings.PROTECTED_PREFIX,
        landing_path=settings.LANDING_PATH,
    )
    if decision.redirect_to is not None:
        logger.info("Route guard redirect", extra={"path": request.url.path, "reason": decision.redirect_to})
        return RedirectResponse(decision.redirect_to, status_code=303)
    return await call_next(request)

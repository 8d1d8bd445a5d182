from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ventas.api.schemas import LoginRequestSchema
from ventas.core.config import settings
from ventas.domain.entities.session import Credentials
from ventas.wiring.dependencies import Container, get_container

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def login_page() -> dict[str, str]:
    return {"page": "login"}


@router.post("/")
async def login(body: LoginRequestSchema, container: Container = Depends(get_container)):
    await container.session.authenticate(Credentials(username=body.username, password=body.password))
    return RedirectResponse(settings.LANDING_PATH, status_code=303)


@router.post("/logout")
async def logout(container: Container = Depends(get_container)):
    container.session.invalidate()
    return RedirectResponse(settings.LOGIN_PATH, status_code=303)

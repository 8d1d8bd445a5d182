from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

import httpx

from ventas.application.ports.token_store import TokenStorePort
from ventas.application.services.session import SessionService
from ventas.application.use_cases.sales_summary import SalesSummaryUseCase
from ventas.application.use_cases.submit_order import SubmitOrderUseCase
from ventas.core.config import settings
from ventas.domain.entities.order import OrderDraft
from ventas.infrastructure.api.gateway import ApiGateway
from ventas.infrastructure.api.token_issuer import VentasTokenIssuer
from ventas.infrastructure.api.ventas_api import VentasApi
from ventas.infrastructure.navigation.recording_navigator import RecordingNavigator
from ventas.infrastructure.store.json_token_store import JsonTokenStore
from ventas.infrastructure.store.memory_token_store import MemoryTokenStore


@dataclass
class Container:
    session: SessionService
    navigator: RecordingNavigator
    gateway: ApiGateway
    api: VentasApi
    draft: OrderDraft
    submit_order: SubmitOrderUseCase
    sales_summary: SalesSummaryUseCase


_container: Container | None = None


def get_token_store() -> TokenStorePort:
    if settings.TOKEN_STORE.lower() == "json":
        return JsonTokenStore(path=settings.TOKEN_STORE_PATH)
    return MemoryTokenStore()


def get_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.VENTAS_API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        headers={"Content-Type": "application/json"},
    )


def build_container(
    client: httpx.AsyncClient | None = None,
    store: TokenStorePort | None = None,
) -> Container:
    client = client or get_http_client()
    navigator = RecordingNavigator()
    session = SessionService(
        store=store or get_token_store(),
        issuer=VentasTokenIssuer(client),
        navigator=navigator,
        ttl=timedelta(hours=settings.SESSION_TTL_HOURS),
        login_path=settings.LOGIN_PATH,
    )
    gateway = ApiGateway(client=client, session=session)
    api = VentasApi(gateway, product_key_field=settings.PRODUCT_KEY_FIELD)
    logging.getLogger(__name__).info(
        "Container built",
        extra={"path": settings.VENTAS_API_BASE_URL, "reason": f"token store={settings.TOKEN_STORE}"},
    )
    return Container(
        session=session,
        navigator=navigator,
        gateway=gateway,
        api=api,
        draft=OrderDraft(),
        submit_order=SubmitOrderUseCase(backend=api),
        sales_summary=SalesSummaryUseCase(api=api),
    )


def get_container() -> Container:
    global _container
    if _container is None:
        _container = build_container()
    return _container


def set_container(container: Container | None) -> None:
    global _container
    _container = container

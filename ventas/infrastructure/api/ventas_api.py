from __future__ import annotations

from typing import Any

from ventas.domain.entities.customer import Customer
from ventas.domain.entities.product import Product
from ventas.application.ports.backend import SalesBackendPort
from ventas.infrastructure.api.gateway import ApiGateway


class VentasApi(SalesBackendPort):
    """Typed access to the catalog, customer and sales endpoints."""

    def __init__(self, gateway: ApiGateway, product_key_field: str = "id") -> None:
        self._gateway = gateway
        self._product_key_field = product_key_field

    # Productos
    async def list_products(self) -> list[Product]:
        records = await self._gateway.get_list("/productos/")
        return [Product.from_record(r, key_field=self._product_key_field) for r in records]

    async def save_product(self, data: dict[str, Any], product_id: Any = None) -> dict[str, Any]:
        if product_id is not None:
            return await self._gateway.put(f"/productos/{product_id}/", data)
        return await self._gateway.post("/productos/", data)

    async def delete_product(self, product_id: Any) -> None:
        await self._gateway.delete(f"/productos/{product_id}/")

    # Clientes
    async def list_customers(self) -> list[Customer]:
        records = await self._gateway.get_list("/clientes/")
        return [Customer.from_record(r) for r in records]

    async def create_customer(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._gateway.post("/clientes/", data)

    async def delete_customer(self, customer_id: Any) -> None:
        await self._gateway.delete(f"/clientes/{customer_id}/")

    # Ventas
    async def list_orders(self) -> list[dict[str, Any]]:
        return await self._gateway.get_list("/ventas/")

    async def create_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        created = await self._gateway.post("/ventas/", payload)
        return created if isinstance(created, dict) else {}

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ventas.domain.entities.customer import Customer
from ventas.domain.entities.product import Product


class SalesBackendPort(ABC):
    @abstractmethod
    async def list_products(self) -> list[Product]:
        raise NotImplementedError

    @abstractmethod
    async def save_product(self, data: dict[str, Any], product_id: Any = None) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def delete_product(self, product_id: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    async def list_customers(self) -> list[Customer]:
        raise NotImplementedError

    @abstractmethod
    async def create_customer(self, data: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def delete_customer(self, customer_id: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    async def list_orders(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def create_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Submit a sale. Not idempotent: every call may create a new order."""
        raise NotImplementedError

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from ventas.api.schemas import CustomerSchema, ProductSchema, SummarySchema
from ventas.application.utils.search import filter_customers, filter_products
from ventas.domain.entities.money import to_json_number
from ventas.wiring.dependencies import Container, get_container

router = APIRouter(prefix="/panel")


@router.get("", response_model=SummarySchema)
async def dashboard(container: Container = Depends(get_container)) -> SummarySchema:
    summary = await container.sales_summary.execute()
    return SummarySchema(
        product_count=summary.product_count,
        order_count=summary.order_count,
        revenue=to_json_number(summary.revenue),
        skipped_orders=summary.skipped_orders,
    )


@router.get("/productos", response_model=list[ProductSchema])
async def list_products(q: str | None = None, container: Container = Depends(get_container)):
    products = filter_products(await container.api.list_products(), q)
    return [ProductSchema.from_entity(p) for p in products]


@router.post("/productos", status_code=201)
async def create_product(data: dict[str, Any], container: Container = Depends(get_container)):
    return await container.api.save_product(data)


@router.put("/productos/{product_id}")
async def update_product(product_id: str, data: dict[str, Any], container: Container = Depends(get_container)):
    return await container.api.save_product(data, product_id=product_id)


@router.delete("/productos/{product_id}", status_code=204)
async def delete_product(product_id: str, container: Container = Depends(get_container)) -> Response:
    await container.api.delete_product(product_id)
    return Response(status_code=204)


@router.get("/clientes", response_model=list[CustomerSchema])
async def list_customers(q: str | None = None, container: Container = Depends(get_container)):
    customers = filter_customers(await container.api.list_customers(), q)
    return [CustomerSchema.from_entity(c) for c in customers]


@router.post("/clientes", status_code=201)
async def create_customer(data: dict[str, Any], container: Container = Depends(get_container)):
    return await container.api.create_customer(data)


@router.delete("/clientes/{customer_id}", status_code=204)
async def delete_customer(customer_id: str, container: Container = Depends(get_container)) -> Response:
    await container.api.delete_customer(customer_id)
    return Response(status_code=204)


@router.get("/ventas")
async def list_orders(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await container.api.list_orders()

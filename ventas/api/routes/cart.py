from __future__ import annotations

from fastapi import APIRouter, Depends

from ventas.api.schemas import (
    AddLineRequestSchema,
    CartSchema,
    OrderSchema,
    SelectCustomerRequestSchema,
    UpdateQuantityRequestSchema,
)
from ventas.domain.entities.product import Product
from ventas.wiring.dependencies import Container, get_container

router = APIRouter(prefix="/panel/carrito")


@router.get("", response_model=CartSchema)
async def get_cart(container: Container = Depends(get_container)) -> CartSchema:
    return CartSchema.from_draft(container.draft)


@router.post("/lineas", response_model=CartSchema)
async def add_line(body: AddLineRequestSchema, container: Container = Depends(get_container)) -> CartSchema:
    product = Product(key=body.product_key, name=body.name, price=body.price, id=body.product_id)
    container.draft.cart.add_line(product, qty=body.quantity)
    return CartSchema.from_draft(container.draft)


@router.patch("/lineas/{product_key}", response_model=CartSchema)
async def update_quantity(
    product_key: str,
    body: UpdateQuantityRequestSchema,
    container: Container = Depends(get_container),
) -> CartSchema:
    container.draft.cart.update_quantity(product_key, body.delta)
    return CartSchema.from_draft(container.draft)


@router.delete("/lineas/{product_key}", response_model=CartSchema)
async def remove_line(product_key: str, container: Container = Depends(get_container)) -> CartSchema:
    container.draft.cart.remove_line(product_key)
    return CartSchema.from_draft(container.draft)


@router.put("/cliente", response_model=CartSchema)
async def select_customer(body: SelectCustomerRequestSchema, container: Container = Depends(get_container)) -> CartSchema:
    container.draft.select_customer(body.customer_ref)
    return CartSchema.from_draft(container.draft)


@router.post("/confirmar", response_model=OrderSchema)
async def submit_order(container: Container = Depends(get_container)) -> OrderSchema:
    order = await container.submit_order.execute(container.draft)
    return OrderSchema.from_entity(order)

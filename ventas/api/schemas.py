from typing import Any

from pydantic import BaseModel, Field

from ventas.domain.entities.cart import Cart
from ventas.domain.entities.customer import Customer
from ventas.domain.entities.money import to_json_number
from ventas.domain.entities.order import Order, OrderDraft
from ventas.domain.entities.product import Product


class LoginRequestSchema(BaseModel):
    username: str
    password: str


class ProductSchema(BaseModel):
    key: str | None = None
    name: str
    price: Any = None
    stock: int | None = None
    id: Any = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        return cls(key=product.key, name=product.name, price=product.price, stock=product.stock, id=product.id)


class CustomerSchema(BaseModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerSchema":
        return cls(id=customer.id, name=customer.name, email=customer.email, phone=customer.phone)


class SummarySchema(BaseModel):
    product_count: int
    order_count: int
    revenue: float
    skipped_orders: int = 0


class AddLineRequestSchema(BaseModel):
    product_key: str | None = None
    name: str = ""
    price: Any = None
    product_id: Any = None
    quantity: int = 1


class UpdateQuantityRequestSchema(BaseModel):
    delta: int


class SelectCustomerRequestSchema(BaseModel):
    customer_ref: str | None = None


class CartLineSchema(BaseModel):
    product_key: str
    display_name: str
    unit_price: Any = None
    quantity: int
    subtotal: float | None = None


class OrderSchema(BaseModel):
    status: str
    customer_ref: str | None = None
    total: float
    remote_id: str | None = None
    message: str | None = None
    errors: dict[str, Any] | None = None

    @classmethod
    def from_entity(cls, order: Order) -> "OrderSchema":
        return cls(
            status=order.status.value,
            customer_ref=order.customer_ref,
            total=to_json_number(order.total),
            remote_id=order.remote_id,
            message=order.message,
            errors=order.errors,
        )


class CartSchema(BaseModel):
    lines: list[CartLineSchema] = Field(default_factory=list)
    total: float
    excluded_keys: list[str] = Field(default_factory=list)
    customer_ref: str | None = None
    submitting: bool = False
    last_order: OrderSchema | None = None

    @classmethod
    def from_draft(cls, draft: OrderDraft) -> "CartSchema":
        cart: Cart = draft.cart
        summary = cart.summarize()
        lines = []
        for line in cart.lines:
            price = line.parsed_price
            lines.append(
                CartLineSchema(
                    product_key=line.product_key,
                    display_name=line.display_name,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    subtotal=to_json_number(price * line.quantity) if price is not None else None,
                )
            )
        return cls(
            lines=lines,
            total=to_json_number(summary.total),
            excluded_keys=list(summary.excluded_keys),
            customer_ref=draft.customer_ref,
            submitting=cart.is_frozen,
            last_order=OrderSchema.from_entity(draft.last_order) if draft.last_order else None,
        )

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from ventas.application.exceptions import CartFrozenError, ValidationError
from ventas.domain.entities.cart import Cart, CartLine
from ventas.domain.entities.money import to_json_number


class OrderStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTING = "submitting"
    COMMITTED = "committed"
    FAILED = "failed"


@dataclass(frozen=True)
class Order:
    customer_ref: str | None
    lines: tuple[CartLine, ...]
    total: Decimal
    status: OrderStatus = OrderStatus.DRAFT
    remote_id: str | None = None
    message: str | None = None
    errors: dict[str, Any] | None = None

    @classmethod
    def from_cart(cls, cart: Cart, customer_ref: str | None) -> "Order":
        return cls(customer_ref=customer_ref, lines=cart.lines, total=cart.total())

    def to_payload(self) -> dict[str, Any]:
        detalles = []
        for line in self.lines:
            price = line.parsed_price
            if price is None:
                raise ValidationError(f"Unit price of {line.product_key} is not a number")
            detalles.append(
                {
                    "producto_id": line.product_id,
                    "cantidad": line.quantity,
                    "precio_unitario": to_json_number(price),
                }
            )
        return {
            "cliente": self.customer_ref,
            "total": to_json_number(self.total),
            "detalles": detalles,
        }


@dataclass
class OrderDraft:
    """The cart plus the selected customer, i.e. everything the sale screen edits."""

    cart: Cart = field(default_factory=Cart)
    customer_ref: str | None = None
    last_order: Order | None = None

    def select_customer(self, customer_ref: str | None) -> None:
        if self.cart.is_frozen:
            raise CartFrozenError("The customer cannot change while the order is being submitted")
        ref = str(customer_ref).strip() if customer_ref is not None else ""
        self.customer_ref = ref or None

    def reset(self) -> None:
        self.cart.clear()
        self.customer_ref = None

from __future__ import annotations

import logging
from dataclasses import replace

from ventas.application.exceptions import ValidationError
from ventas.application.ports.backend import SalesBackendPort
from ventas.application.utils.failure import describe_failure
from ventas.domain.entities.order import Order, OrderDraft, OrderStatus


class SubmitOrderUseCase:
    """
    Draft -> Submitting -> Committed | Failed.
    The draft is only reset once the backend confirms the sale. On any
    failure the cart and customer stay exactly as they were and the error is
    re-raised for the caller to show.
    """

    def __init__(self, backend: SalesBackendPort) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    async def execute(self, draft: OrderDraft) -> Order:
        self._check_preconditions(draft)

        with draft.cart.frozen():
            order = replace(
                Order.from_cart(draft.cart, draft.customer_ref),
                status=OrderStatus.SUBMITTING,
            )
            draft.last_order = order
            payload = order.to_payload()
            self._logger.info(
                "Submitting order",
                extra={"order_status": order.status.value, "reason": f"{len(order.lines)} lines"},
            )
            try:
                created = await self._backend.create_order(payload)
            except Exception as e:
                message, errors = describe_failure(e)
                draft.last_order = replace(order, status=OrderStatus.FAILED, message=message, errors=errors)
                self._logger.warning(
                    "Order submission failed",
                    extra={"order_status": OrderStatus.FAILED.value, "reason": message},
                )
                raise

        remote_id = created.get("id")
        committed = replace(
            order,
            status=OrderStatus.COMMITTED,
            remote_id=str(remote_id) if remote_id is not None else None,
            message="Sale registered",
        )
        draft.reset()
        draft.last_order = committed
        self._logger.info("Order committed", extra={"order_status": committed.status.value})
        return committed

    def _check_preconditions(self, draft: OrderDraft) -> None:
        missing = []
        if draft.cart.is_empty:
            missing.append("the cart is empty")
        if not draft.customer_ref:
            missing.append("no customer is selected")
        if missing:
            raise ValidationError("Cannot submit the order: " + " and ".join(missing))

        unparseable = draft.cart.unparseable_keys()
        if unparseable:
            raise ValidationError(
                "Cannot submit the order: unit price is not a number for " + ", ".join(unparseable)
            )

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ventas.domain.entities.money import try_parse_amount
from ventas.application.ports.backend import SalesBackendPort


@dataclass(frozen=True)
class SalesSummary:
    product_count: int
    order_count: int
    revenue: Decimal
    skipped_orders: int = 0


def summarize_sales(product_count: int, orders: list[dict[str, Any]]) -> SalesSummary:
    logger = logging.getLogger(__name__)
    revenue = Decimal(0)
    skipped = 0
    for order in orders:
        # Orders without a total count as zero, as the dashboard always did
        raw_total = order.get("total")
        amount = try_parse_amount(raw_total) if raw_total not in (None, "") else Decimal(0)
        if amount is None:
            skipped += 1
            logger.warning(
                "Order total is not a number, left out of revenue",
                extra={"reason": repr(raw_total)},
            )
            continue
        revenue += amount
    return SalesSummary(
        product_count=product_count,
        order_count=len(orders),
        revenue=revenue,
        skipped_orders=skipped,
    )


class SalesSummaryUseCase:
    def __init__(self, api: SalesBackendPort) -> None:
        self._api = api

    async def execute(self) -> SalesSummary:
        products, orders = await asyncio.gather(
            self._api.list_products(), self._api.list_orders(), return_exceptions=True
        )
        for result in (products, orders):
            if isinstance(result, BaseException):
                raise result
        return summarize_sales(len(products), orders)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    key: str | None  # durable catalog identifier used to merge cart lines
    name: str
    price: Any  # raw value from the backend, numeric or textual
    stock: int | None = None
    id: Any = None  # backend primary key, sent as producto_id

    @classmethod
    def from_record(cls, record: dict[str, Any], key_field: str = "id") -> "Product":
        raw_key = record.get(key_field)
        key = str(raw_key).strip() if raw_key is not None else None
        stock = record.get("cantidad")
        return cls(
            key=key or None,
            name=str(record.get("nombre") or ""),
            price=record.get("precio"),
            stock=stock if isinstance(stock, int) else None,
            id=record.get("id"),
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Customer":
        return cls(
            id=str(record.get("id", "")),
            name=str(record.get("nombre") or ""),
            email=record.get("email") or None,
            phone=record.get("telefono") or None,
        )

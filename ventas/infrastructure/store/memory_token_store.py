from __future__ import annotations

from ventas.application.ports.token_store import TokenStorePort
from ventas.domain.entities.session import Session


class MemoryTokenStore(TokenStorePort):
    def __init__(self) -> None:
        self._session: Session | None = None

    def load(self) -> Session | None:
        return self._session

    def save(self, session: Session) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None

from abc import ABC, abstractmethod

from ventas.domain.entities.session import Session


class TokenStorePort(ABC):
    @abstractmethod
    def load(self) -> Session | None:
        """Return the persisted session, or None when nothing is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, session: Session) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

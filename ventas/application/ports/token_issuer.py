from abc import ABC, abstractmethod

from ventas.domain.entities.session import Credentials


class TokenIssuerPort(ABC):
    @abstractmethod
    async def issue(self, credentials: Credentials) -> str:
        """Exchange credentials for an access token. Raises AuthError on rejection."""
        raise NotImplementedError

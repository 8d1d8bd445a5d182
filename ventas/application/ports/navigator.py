from abc import ABC, abstractmethod


class NavigatorPort(ABC):
    @abstractmethod
    def redirect(self, path: str) -> None:
        raise NotImplementedError

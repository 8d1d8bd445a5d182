from __future__ import annotations

from typing import Any


class VentasError(RuntimeError):
    """Base class for every failure raised by the session and order core."""
    pass


class AuthError(VentasError):
    """Raised when the token endpoint rejects the supplied credentials."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SessionExpired(VentasError):
    """Raised when an authenticated call comes back 401."""

    def __init__(self, message: str = "Session expired", invalidated: bool = False) -> None:
        super().__init__(message)
        self.invalidated = invalidated


class ValidationError(VentasError):
    """Raised for local precondition failures, always before any network call."""
    pass


class CartFrozenError(ValidationError):
    """Raised when the cart is mutated while an order is being submitted."""
    pass


class NetworkError(VentasError):
    """Raised when the backend could not be reached (no response)."""
    pass


class ServerRejected(VentasError):
    """Raised for any non-2xx response other than 401."""

    def __init__(self, status_code: int, body: Any, message: str | None = None) -> None:
        super().__init__(message or f"Backend rejected the request with status {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def field_errors(self) -> dict[str, Any] | None:
        """Field-level errors exactly as the backend sent them, when it sent a JSON object."""
        if isinstance(self.body, dict) and self.body:
            return self.body
        return None

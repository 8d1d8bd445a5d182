from __future__ import annotations

import logging

import httpx

from ventas.application.exceptions import AuthError, NetworkError
from ventas.application.ports.token_issuer import TokenIssuerPort
from ventas.domain.entities.session import Credentials
from ventas.infrastructure.api.responses import error_message, read_body


class VentasTokenIssuer(TokenIssuerPort):
    def __init__(self, client: httpx.AsyncClient, token_path: str = "/token/") -> None:
        self._client = client
        self._token_path = token_path
        self._logger = logging.getLogger(__name__)

    async def issue(self, credentials: Credentials) -> str:
        payload = {"username": credentials.username, "password": credentials.password}
        try:
            resp = await self._client.post(self._token_path, json=payload)
        except httpx.TransportError as e:
            self._logger.error("Token request failed", extra={"reason": str(e)})
            raise NetworkError(f"Could not reach the login service: {e}") from e

        if resp.status_code >= 300:
            body = read_body(resp)
            message = error_message(body, "Invalid credentials")
            self._logger.warning(
                "Login rejected",
                extra={"status": resp.status_code, "reason": message},
            )
            raise AuthError(message, status_code=resp.status_code)

        data = read_body(resp)
        token = data.get("access") if isinstance(data, dict) else None
        if not token:
            raise AuthError("Login response did not include an access token", status_code=resp.status_code)
        return str(token)

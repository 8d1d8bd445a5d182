from __future__ import annotations

import logging
from typing import Any

import httpx

from ventas.application.exceptions import NetworkError, ServerRejected, SessionExpired
from ventas.application.services.session import SessionService
from ventas.infrastructure.api.responses import error_message, normalize_list, read_body


class ApiGateway:
    """
    Single exit point for calls to the ventas backend.
    Attaches the bearer token, tags the call with the session epoch it was
    issued under, and turns a 401 into a session expiry before the caller
    sees the error. Any other non-2xx answer is a ServerRejected and reaches
    the caller untouched.
    """

    def __init__(self, client: httpx.AsyncClient, session: SessionService) -> None:
        self._client = client
        self._session = session
        self._logger = logging.getLogger(__name__)

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        epoch = self._session.epoch
        headers = self._session.attach()
        try:
            resp = await self._client.request(method, path, json=json, params=params, headers=headers)
        except httpx.HTTPError as e:
            self._logger.error(
                "Backend unreachable",
                extra={"path": path, "reason": str(e)},
            )
            raise NetworkError(f"Could not reach the backend: {e}") from e

        if resp.status_code == 401:
            invalidated = self._session.expire(epoch)
            self._logger.warning(
                "Unauthorized response",
                extra={"path": path, "status": resp.status_code, "epoch": epoch},
            )
            raise SessionExpired(invalidated=invalidated)

        if not resp.is_success:
            body = read_body(resp)
            self._logger.error(
                "Backend rejected request",
                extra={"path": path, "status": resp.status_code, "reason": error_message(body, "")},
            )
            raise ServerRejected(resp.status_code, body)

        return resp

    async def get_list(self, path: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        resp = await self.request("GET", path, params=params)
        body = read_body(resp)
        items = normalize_list(body)
        if items is None:
            raise ServerRejected(resp.status_code, body, message=f"Unexpected list response from {path}")
        return items

    async def post(self, path: str, payload: Any) -> Any:
        return read_body(await self.request("POST", path, json=payload))

    async def put(self, path: str, payload: Any) -> Any:
        return read_body(await self.request("PUT", path, json=payload))

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)

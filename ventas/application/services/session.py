from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone

from ventas.application.ports.navigator import NavigatorPort
from ventas.application.ports.token_issuer import TokenIssuerPort
from ventas.application.ports.token_store import TokenStorePort
from ventas.domain.entities.session import (
    Credentials,
    Session,
    SessionTransition,
    decide_unauthorized,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionService:
    """
    Owns the process-wide session.
    Every write replaces the whole Session value and bumps its epoch, so a
    reader never sees a half-updated token, and requests can be tagged with
    the epoch they were issued under.
    """

    def __init__(
        self,
        store: TokenStorePort,
        issuer: TokenIssuerPort,
        navigator: NavigatorPort,
        ttl: timedelta = timedelta(hours=24),
        login_path: str = "/",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._issuer = issuer
        self._navigator = navigator
        self._ttl = ttl
        self._login_path = login_path
        self._clock = clock
        self._logger = logging.getLogger(__name__)
        self._session = Session()
        self._restore()

    @property
    def current(self) -> Session:
        return self._session

    @property
    def epoch(self) -> int:
        return self._session.epoch

    def is_authenticated(self) -> bool:
        return self._session.is_valid(self._clock())

    async def authenticate(self, credentials: Credentials) -> Session:
        token = await self._issuer.issue(credentials)
        session = self.init(token)
        self._logger.info("Session established", extra={"epoch": session.epoch})
        return session

    def init(self, token: str) -> Session:
        now = self._clock()
        self._session = Session(
            token=token,
            issued_at=now,
            expires_at=now + self._ttl,
            epoch=self._session.epoch + 1,
        )
        self._store.save(self._session)
        return self._session

    def clear(self) -> None:
        self._session = Session(epoch=self._session.epoch + 1)
        self._store.clear()

    def attach(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        attached = dict(headers or {})
        if self.is_authenticated():
            attached["Authorization"] = f"Bearer {self._session.token}"
        return attached

    def invalidate(self) -> bool:
        """Clear the token and send the user to the login path. No-op without a token."""
        if self._session.token is None:
            return False
        self.clear()
        self._logger.info("Session invalidated", extra={"epoch": self._session.epoch})
        self._navigator.redirect(self._login_path)
        return True

    def expire(self, request_epoch: int) -> bool:
        """Handle a 401 for a request issued under request_epoch. Returns True if it ended the session."""
        transition = decide_unauthorized(request_epoch, self._session)
        if transition is SessionTransition.IGNORE:
            self._logger.info(
                "Ignoring stale unauthorized response",
                extra={"epoch": request_epoch, "reason": f"current epoch {self._session.epoch}"},
            )
            return False
        return self.invalidate()

    def _restore(self) -> None:
        stored = self._store.load()
        if stored is None:
            return
        if not stored.is_valid(self._clock()):
            self._logger.info("Stored session expired, discarding")
            self._store.clear()
            return
        self._session = Session(
            token=stored.token,
            issued_at=stored.issued_at,
            expires_at=stored.expires_at,
            epoch=1,
        )

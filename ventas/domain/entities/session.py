from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class Session:
    token: str | None = None
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    epoch: int = 0  # bumped on every init/clear, process-local

    def is_valid(self, now: datetime) -> bool:
        if not self.token:
            return False
        return self.expires_at is None or now < self.expires_at


class SessionTransition(str, Enum):
    INVALIDATE = "invalidate"
    IGNORE = "ignore"


def decide_unauthorized(request_epoch: int, current: Session) -> SessionTransition:
    """
    Decide what a 401 means for the session.
    Only a response to a request issued under the current session may end it;
    responses tagged with an older epoch, or arriving when there is no token
    left to clear, are ignored.
    """
    if current.token is None:
        return SessionTransition.IGNORE
    if request_epoch != current.epoch:
        return SessionTransition.IGNORE
    return SessionTransition.INVALIDATE

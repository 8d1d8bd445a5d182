from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from ventas.application.ports.token_store import TokenStorePort
from ventas.domain.entities.session import Session


class JsonTokenStore(TokenStorePort):
    """Keeps the access token on disk between runs, like the browser cookie does."""

    def __init__(self, path: str = "./data/session.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def load(self) -> Session | None:
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return self._deserialize(data)
            except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as e:
                self._logger.warning("Discarding unreadable session file", extra={"reason": str(e)})
                return None

    def save(self, session: Session) -> None:
        with self._lock:
            # Replaced in one step; readers never see a partial file
            tmp_path = self._path.with_suffix(".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._serialize(session), f)
            os.replace(tmp_path, self._path)

    def clear(self) -> None:
        with self._lock:
            if self._path.exists():
                self._path.unlink()

    def _serialize(self, session: Session) -> dict[str, Any]:
        return {
            "access_token": session.token,
            "issued_at": session.issued_at.isoformat() if session.issued_at else None,
            "expires_at": session.expires_at.isoformat() if session.expires_at else None,
        }

    def _deserialize(self, data: dict[str, Any]) -> Session | None:
        token = data.get("access_token")
        if not token:
            return None
        issued_at = data.get("issued_at")
        expires_at = data.get("expires_at")
        return Session(
            token=token,
            issued_at=datetime.fromisoformat(issued_at) if issued_at else None,
            expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
        )

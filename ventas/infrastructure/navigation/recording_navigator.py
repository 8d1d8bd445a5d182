from __future__ import annotations

import logging

from ventas.application.ports.navigator import NavigatorPort


class RecordingNavigator(NavigatorPort):
    """
    Remembers the most recent redirects the core asked for.
    The web layer performs the actual HTTP redirect; this keeps them
    observable for callers and tests.
    """

    def __init__(self, history_limit: int = 20) -> None:
        self.redirects: list[str] = []
        self._history_limit = history_limit
        self._logger = logging.getLogger(__name__)

    def redirect(self, path: str) -> None:
        self.redirects.append(path)
        if len(self.redirects) > self._history_limit:
            self.redirects = self.redirects[-self._history_limit :]
        self._logger.info("Redirect requested", extra={"path": path})

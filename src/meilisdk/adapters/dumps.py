"""Handler: /dumps."""

from __future__ import annotations

from urllib.parse import quote

from meilisdk.core.interfaces import Dispatcher


class DumpsHandler:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def create(self) -> str:
        return self._dispatcher.execute("POST", "/dumps")

    def get_status(self, uid: str) -> str:
        return self._dispatcher.execute("GET", f"/dumps/{quote(uid, safe='')}/status")

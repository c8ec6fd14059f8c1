"""Handler: /indexes.

One dispatcher call per method, raw JSON text out.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from meilisdk.core.errors import INDEX_NOT_FOUND, MeiliSearchApiError
from meilisdk.core.interfaces import Dispatcher

logger = logging.getLogger(__name__)


def index_path(uid: str) -> str:
    return f"/indexes/{quote(uid, safe='')}"


class IndexesHandler:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def get_all(self) -> str:
        return self._dispatcher.execute("GET", "/indexes")

    def get(self, uid: str) -> str:
        return self._dispatcher.execute("GET", index_path(uid))

    def create(self, uid: str, primary_key: str | None = None) -> str:
        body: dict[str, Any] = {"uid": uid}
        if primary_key is not None:
            body["primaryKey"] = primary_key
        return self._dispatcher.execute("POST", "/indexes", body=body)

    def update_primary_key(self, uid: str, primary_key: str) -> str:
        return self._dispatcher.execute("PUT", index_path(uid), body={"primaryKey": primary_key})

    def delete(self, uid: str) -> str:
        return self._dispatcher.execute("DELETE", index_path(uid))

    def delete_if_exists(self, uid: str) -> bool:
        """Delete the index; `False` if the server reports `index_not_found`."""

        try:
            self.delete(uid)
        except MeiliSearchApiError as exc:
            if exc.error_code == INDEX_NOT_FOUND:
                logger.debug("Index %r not found, nothing to delete", uid)
                return False
            raise
        return True

"""Handler: /indexes/{uid}/documents.

Document bodies are arbitrary JSON objects; they are not modelled.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
from urllib.parse import quote

from meilisdk.adapters.indexes import index_path
from meilisdk.core.interfaces import Dispatcher


def _documents_path(uid: str, document_id: str | int | None = None) -> str:
    path = f"{index_path(uid)}/documents"
    if document_id is not None:
        path = f"{path}/{quote(str(document_id), safe='')}"
    return path


class DocumentsHandler:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def get_all(
        self,
        uid: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        attributes_to_retrieve: Sequence[str] | None = None,
    ) -> str:
        params: dict[str, Any] = {"limit": limit, "offset": offset}
        if attributes_to_retrieve:
            params["attributesToRetrieve"] = ",".join(attributes_to_retrieve)
        return self._dispatcher.execute("GET", _documents_path(uid), params=params)

    def get(self, uid: str, document_id: str | int) -> str:
        return self._dispatcher.execute("GET", _documents_path(uid, document_id))

    def add(
        self,
        uid: str,
        documents: Iterable[dict[str, Any]],
        primary_key: str | None = None,
    ) -> str:
        return self._dispatcher.execute(
            "POST",
            _documents_path(uid),
            body=list(documents),
            params={"primaryKey": primary_key},
        )

    def delete(self, uid: str, document_id: str | int) -> str:
        return self._dispatcher.execute("DELETE", _documents_path(uid, document_id))

    def delete_all(self, uid: str) -> str:
        return self._dispatcher.execute("DELETE", _documents_path(uid))

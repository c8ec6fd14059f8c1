"""Domain models (Pydantic v2).

Why Pydantic here:
- Strict validation of server payloads: a missing `uid` is an error, not a
  silently defaulted field.
- camelCase aliases keep the wire format out of the Python API.

Note:
- `Index` is the only entity that exposes further operations. It carries a
  private reference to the shared dispatcher (and through it, the frozen
  settings); that reference is never serialized.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Sequence

from pydantic import BaseModel, Field, PrivateAttr
from pydantic.config import ConfigDict

from meilisdk.adapters.documents import DocumentsHandler
from meilisdk.adapters.indexes import IndexesHandler
from meilisdk.core.config import ClientSettings
from meilisdk.core.domain.deserializer import parse_entity
from meilisdk.core.errors import MeiliSearchError
from meilisdk.core.interfaces import Dispatcher


class DumpStatus(str, Enum):
    """Lifecycle of a dump job on the server."""

    IN_PROGRESS = "in_progress"
    PROCESSING = "processing"
    FAILED = "failed"
    DONE = "done"

    @property
    def finished(self) -> bool:
        return self in (DumpStatus.FAILED, DumpStatus.DONE)


class Dump(BaseModel):
    """A dump job, as reported by the server."""

    model_config = ConfigDict(extra="ignore")

    uid: str = Field(
        ...,
        min_length=1,
        description="Identifier of the dump job.",
    )
    status: DumpStatus = Field(
        ...,
        description="Current state of the dump job.",
    )


class UpdateStatus(BaseModel):
    """Acknowledgement of an asynchronous document update."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    update_id: int = Field(
        ...,
        alias="updateId",
        ge=0,
        description="Identifier of the enqueued update.",
    )


class Index(BaseModel):
    """A named collection of documents.

    Obtained either from a server response or as a local reference
    (`Client.index(uid)`), which performs no network call. Both kinds behave
    identically once bound.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    uid: str = Field(
        ...,
        min_length=1,
        description="Unique identifier of the index on the instance.",
    )
    name: str | None = Field(
        default=None,
        description="Display name (older servers only).",
    )
    primary_key: str | None = Field(
        default=None,
        alias="primaryKey",
        description="Document field used as the unique document identifier.",
    )
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        alias="updatedAt",
    )

    _dispatcher: Dispatcher | None = PrivateAttr(default=None)

    def bind(self, dispatcher: Dispatcher) -> "Index":
        """Attach the shared dispatcher so the index can issue requests."""

        self._dispatcher = dispatcher
        return self

    @property
    def config(self) -> ClientSettings | None:
        if self._dispatcher is None:
            return None
        return self._dispatcher.settings

    def _require_dispatcher(self) -> Dispatcher:
        if self._dispatcher is None:
            raise MeiliSearchError(
                f"Index {self.uid!r} is not bound to a client; use Client.index() or Client.get_index()"
            )
        return self._dispatcher

    def _indexes(self) -> IndexesHandler:
        return IndexesHandler(self._require_dispatcher())

    def _documents(self) -> DocumentsHandler:
        return DocumentsHandler(self._require_dispatcher())

    def _refresh_from(self, raw: str) -> "Index":
        fresh = parse_entity(raw, Index)
        self.name = fresh.name
        self.primary_key = fresh.primary_key
        self.created_at = fresh.created_at
        self.updated_at = fresh.updated_at
        return self

    # Index lifecycle

    def fetch_info(self) -> "Index":
        """Reload the server-side fields of this index in place."""

        return self._refresh_from(self._indexes().get(self.uid))

    def update(self, primary_key: str) -> "Index":
        return self._refresh_from(self._indexes().update_primary_key(self.uid, primary_key))

    def delete(self) -> None:
        self._indexes().delete(self.uid)

    def delete_if_exists(self) -> bool:
        return self._indexes().delete_if_exists(self.uid)

    # Documents

    def get_documents(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        attributes_to_retrieve: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        raw = self._documents().get_all(
            self.uid,
            limit=limit,
            offset=offset,
            attributes_to_retrieve=attributes_to_retrieve,
        )
        return parse_entity(raw, list[dict[str, Any]])

    def get_document(self, document_id: str | int) -> dict[str, Any]:
        return parse_entity(self._documents().get(self.uid, document_id), dict[str, Any])

    def add_documents(
        self,
        documents: Iterable[dict[str, Any]],
        primary_key: str | None = None,
    ) -> UpdateStatus:
        raw = self._documents().add(self.uid, documents, primary_key=primary_key)
        return parse_entity(raw, UpdateStatus)

    def delete_document(self, document_id: str | int) -> UpdateStatus:
        return parse_entity(self._documents().delete(self.uid, document_id), UpdateStatus)

    def delete_all_documents(self) -> UpdateStatus:
        return parse_entity(self._documents().delete_all(self.uid), UpdateStatus)

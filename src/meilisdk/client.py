"""Client facade.

Composes the frozen settings, one dispatcher and the resource handlers.
Every `Index` handed back to the caller is bound to the same dispatcher, so
it can issue further requests without a new client.
"""

from __future__ import annotations

import logging

import httpx

from meilisdk.adapters.dumps import DumpsHandler
from meilisdk.adapters.http_client import RequestDispatcher
from meilisdk.adapters.indexes import IndexesHandler
from meilisdk.core.config import ClientSettings
from meilisdk.core.domain import Dump, Index, parse_entities, parse_entity
from meilisdk.core.errors import INDEX_NOT_FOUND, MeiliSearchApiError
from meilisdk.core.interfaces import Dispatcher

logger = logging.getLogger(__name__)


class Client:
    """Entry point for a search engine instance.

    Usage:
        client = Client(ClientSettings(host_url="http://localhost:7700", api_key="masterKey"))
        movies = client.get_or_create_index("movies", "id")
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self.dispatcher: Dispatcher = dispatcher or RequestDispatcher(settings, transport=transport)
        self.settings = self.dispatcher.settings
        self.indexes_handler = IndexesHandler(self.dispatcher)
        self.dumps_handler = DumpsHandler(self.dispatcher)

    def _bind(self, index: Index) -> Index:
        return index.bind(self.dispatcher)

    # Indexes

    def create_index(self, uid: str, primary_key: str | None = None) -> Index:
        raw = self.indexes_handler.create(uid, primary_key)
        return self._bind(parse_entity(raw, Index))

    def get_indexes(self) -> list[Index]:
        return [self._bind(index) for index in parse_entities(self.get_raw_indexes(), Index)]

    def get_raw_indexes(self) -> str:
        return self.indexes_handler.get_all()

    def index(self, uid: str) -> Index:
        """Local reference to `uid`. No HTTP call; the index may not exist yet."""

        return self._bind(Index(uid=uid))

    def get_index(self, uid: str) -> Index:
        return self._bind(parse_entity(self.get_raw_index(uid), Index))

    def get_raw_index(self, uid: str) -> str:
        return self.indexes_handler.get(uid)

    def update_index(self, uid: str, primary_key: str) -> Index:
        raw = self.indexes_handler.update_primary_key(uid, primary_key)
        return self._bind(parse_entity(raw, Index))

    def delete_index(self, uid: str) -> None:
        self.indexes_handler.delete(uid)

    def delete_index_if_exists(self, uid: str) -> bool:
        return self.indexes_handler.delete_if_exists(uid)

    def get_or_create_index(self, uid: str, primary_key: str | None = None) -> Index:
        """Fetch `uid`, creating it only when the server answers `index_not_found`.

        The fallback is selected by the error code string, not the HTTP status.
        Every other failure propagates unchanged.
        """

        try:
            return self.get_index(uid)
        except MeiliSearchApiError as exc:
            if exc.error_code != INDEX_NOT_FOUND:
                raise
        logger.info("Index %r not found, creating it", uid)
        return self.create_index(uid, primary_key)

    # Dumps

    def create_dump(self) -> Dump:
        return parse_entity(self.dumps_handler.create(), Dump)

    def get_dump_status(self, uid: str) -> Dump:
        return parse_entity(self.dumps_handler.get_status(uid), Dump)

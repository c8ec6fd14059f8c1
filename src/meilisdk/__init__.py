"""meilisdk: synchronous client for the Meilisearch HTTP API."""

from __future__ import annotations

__version__ = "0.3.0"

from meilisdk.client import Client  # noqa: E402
from meilisdk.core.config import ClientSettings  # noqa: E402
from meilisdk.core.domain import Dump, DumpStatus, Index, UpdateStatus  # noqa: E402
from meilisdk.core.errors import (  # noqa: E402
    INDEX_NOT_FOUND,
    MeiliSearchApiError,
    MeiliSearchCommunicationError,
    MeiliSearchError,
    MeiliSearchParseError,
    MeiliSearchTransportError,
)

__all__ = [
    "INDEX_NOT_FOUND",
    "Client",
    "ClientSettings",
    "Dump",
    "DumpStatus",
    "Index",
    "MeiliSearchApiError",
    "MeiliSearchCommunicationError",
    "MeiliSearchError",
    "MeiliSearchParseError",
    "MeiliSearchTransportError",
    "UpdateStatus",
    "__version__",
]

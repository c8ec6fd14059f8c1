"""Adapters: HTTP dispatcher and per-resource handlers.

Each handler module wraps one REST resource and returns raw bodies; the
client turns those into domain entities.
"""

from meilisdk.adapters.documents import DocumentsHandler
from meilisdk.adapters.dumps import DumpsHandler
from meilisdk.adapters.http_client import RequestDispatcher, build_client
from meilisdk.adapters.indexes import IndexesHandler

__all__ = [
    "DocumentsHandler",
    "DumpsHandler",
    "IndexesHandler",
    "RequestDispatcher",
    "build_client",
]

"""Interfaces/abstractions of the core.

Why:
- Handlers and entities depend on the `Dispatcher` contract, not on httpx.
- Tests can plug in a recording dispatcher without any network.
"""

from meilisdk.core.interfaces.dispatcher import Dispatcher

__all__ = ["Dispatcher"]

"""Request dispatcher contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- `RequestDispatcher` is the httpx implementation; anything with the same
  `execute` signature can stand in for it.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from meilisdk.core.config import ClientSettings


@runtime_checkable
class Dispatcher(Protocol):
    """Sends one request and returns the raw body.

    Design rules:
    - Synchronous, one HTTP call per `execute`, no retries.
    - Non-2xx responses and network failures surface as `MeiliSearchError`
      subclasses, never as return values.
    """

    settings: ClientSettings

    def execute(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        ...

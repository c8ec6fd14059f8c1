"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and auth for every request.
- Maps HTTP outcomes onto the client's exception hierarchy in one place.
- Makes testing easy: an `httpx.MockTransport` can be injected.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from meilisdk.core.config import ClientSettings
from meilisdk.core.errors import (
    MeiliSearchApiError,
    MeiliSearchCommunicationError,
    MeiliSearchTransportError,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Meili-API-Key"


def build_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` bound to the instance base URL.

    Why a builder:
    - Centralizes timeouts/headers so every handler behaves the same.
    - The API key header is only sent when a key is configured.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if settings.api_key:
        headers[API_KEY_HEADER] = settings.api_key
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.host_url.rstrip("/"),
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers=headers,
        transport=transport,
    )


def _api_error_from(response: httpx.Response) -> MeiliSearchApiError | None:
    """Read the `{message, errorCode, errorType, errorLink}` envelope, if any."""

    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None

    code = payload.get("errorCode")
    message = payload.get("message")
    if not isinstance(code, str) or not isinstance(message, str):
        return None

    return MeiliSearchApiError(
        status_code=response.status_code,
        message=message,
        error_code=code,
        error_type=payload.get("errorType"),
        error_link=payload.get("errorLink"),
    )


class RequestDispatcher:
    """Executes one request per call against the configured instance."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self._transport = transport

    def execute(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        """Send the request and return the raw body of a 2xx response.

        Raises:
            MeiliSearchApiError: non-2xx with an error envelope.
            MeiliSearchTransportError: non-2xx without a readable envelope.
            MeiliSearchCommunicationError: network-level failure.
        """

        content = json.dumps(body) if body is not None else None
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug("%s %s params=%s", method, path, query or None)
        try:
            with build_client(self.settings, transport=self._transport) as client:
                response = client.request(method, path, content=content, params=query or None)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise MeiliSearchCommunicationError(
                f"Could not reach {self.settings.host_url}: {exc}"
            ) from exc

        if response.is_success:
            return response.text

        api_error = _api_error_from(response)
        if api_error is not None:
            logger.warning("%s %s -> %s %s", method, path, response.status_code, api_error.error_code)
            raise api_error

        logger.warning("%s %s -> HTTP %s", method, path, response.status_code)
        raise MeiliSearchTransportError(status_code=response.status_code, body=response.text)

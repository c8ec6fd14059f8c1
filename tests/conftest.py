import json
from typing import Callable

import httpx
import pytest

from meilisdk import Client, ClientSettings

HOST = "http://meili.test"


class RecordingServer:
    """Scripted responses keyed by (method, path), with a log of every request."""

    def __init__(self):
        self.routes: dict[tuple[str, str], list[dict]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, json_body=None, text: str | None = None):
        if text is not None:
            kwargs = {"text": text}
        elif json_body is not None:
            kwargs = {"json": json_body}
        else:
            kwargs = {}
        self.routes.setdefault((method, path), []).append({"status_code": status, **kwargs})

    def not_found(self, method: str, path: str, uid: str):
        self.add(
            method,
            path,
            404,
            {
                "message": f"Index {uid} not found",
                "errorCode": "index_not_found",
                "errorType": "invalid_request_error",
                "errorLink": "https://docs.meilisearch.com/errors#index_not_found",
            },
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        scripted = queue.pop(0) if len(queue) > 1 else queue[0]
        return httpx.Response(**scripted)

    def calls(self, method: str | None = None, path: str | None = None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if (method is None or r.method == method) and (path is None or r.url.path == path)
        ]

    def body(self, request: httpx.Request):
        return json.loads(request.content) if request.content else None


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(host_url=HOST, api_key="masterKey")


@pytest.fixture
def make_client(server, settings) -> Callable[..., Client]:
    def _make(**overrides) -> Client:
        effective = settings.model_copy(update=overrides) if overrides else settings
        return Client(effective, transport=httpx.MockTransport(server.handler))

    return _make


@pytest.fixture
def client(make_client) -> Client:
    return make_client()

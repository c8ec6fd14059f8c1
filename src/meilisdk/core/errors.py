"""Exception hierarchy.

- `MeiliSearchApiError`: the server understood the request and rejected it.
  Carries a stable `error_code` callers can branch on.
- `MeiliSearchTransportError`: non-2xx response without a readable error envelope.
- `MeiliSearchCommunicationError`: the request never reached the server (or no
  response came back).
- `MeiliSearchParseError`: a 2xx body that does not match the expected entity.
"""

from __future__ import annotations

from functools import partial

INDEX_NOT_FOUND = "index_not_found"


class MeiliSearchError(Exception):
    """Base error for the client."""


class MeiliSearchApiError(MeiliSearchError):
    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        error_code: str,
        error_type: str | None = None,
        error_link: str | None = None,
    ) -> None:
        super().__init__(f"{error_code}: {message} (HTTP {status_code})")
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        self.error_type = error_type
        self.error_link = error_link

    def __reduce__(self):
        return (
            partial(
                type(self),
                status_code=self.status_code,
                message=self.message,
                error_code=self.error_code,
                error_type=self.error_type,
                error_link=self.error_link,
            ),
            (),
        )


class MeiliSearchTransportError(MeiliSearchError):
    def __init__(self, *, status_code: int, body: str) -> None:
        super().__init__(f"Unexpected HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body

    def __reduce__(self):
        return (partial(type(self), status_code=self.status_code, body=self.body), ())


class MeiliSearchCommunicationError(MeiliSearchError):
    """Connection refused, timeout, DNS failure..."""


class MeiliSearchParseError(MeiliSearchError):
    """A successful response could not be turned into the expected entity."""

"""
httpx-backed credential implementations of `BaseAuth`.

`HttpAuth` holds the shared request logic:

- A fresh `httpx.AsyncClient` is opened per request and closed before
  returning, so no connection pool outlives a call.
- Redirects (http to https, moved endpoints) are followed; only the final
  response is classified.
- `prepare()` lets a subclass attach its credential to the URL or headers.
- httpx failures and non-2xx answers are classified into the `NetworkError`
  family; the original httpx exception is kept as `__cause__`.

Concrete schemes:

- `Anonymous`: no credential.
- `ApiKey`: `key=<api key>` query parameter.
- `AccessToken`: `Authorization: Bearer <token>` header.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from ..config import settings
from ..enums.http import HttpMethod
from ..enums.message import FailMessage
from ..errors.app_error import (
    AuthenticationError,
    DecodingError,
    HttpStatusError,
    TransportError,
)
from .base import BaseAuth

logger = logging.getLogger(__name__)

BODY_EXCERPT_CHARS = 400
"""Maximum number of response body characters copied into error context."""

AUTH_FAILURE_STATUSES = (401, 403)
"""Statuses reported as `AuthenticationError` rather than `HttpStatusError`."""


class HttpAuth(BaseAuth):
    """
    Shared httpx request execution for the bundled credential schemes.

    Args:
        timeout: Per-request timeout in seconds. Defaults to
            `settings.http_timeout`.
        transport: Optional `httpx.AsyncBaseTransport` handed to every
            `AsyncClient`, e.g. `httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    def prepare(
        self, url: httpx.URL, headers: Dict[str, str]
    ) -> Tuple[httpx.URL, Dict[str, str]]:
        """Attach credentials. The base implementation sends none."""
        return url, headers

    async def request(self, url: str, method: HttpMethod | str = HttpMethod.GET) -> Any:
        """
        Send one request and return its decoded JSON body.

        Raises:
            TransportError: The request could not be completed.
            AuthenticationError: The endpoint answered 401 or 403.
            HttpStatusError: The endpoint answered any other non-2xx status.
            DecodingError: The body is not valid JSON.
        """
        verb = str(method).upper()
        target, headers = self.prepare(
            httpx.URL(url), {"User-Agent": settings.user_agent}
        )
        logger.debug(f"{verb} {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                res = await client.request(verb, target, headers=headers)
        except httpx.TransportError as e:
            raise TransportError(
                FailMessage.TRANSPORT_FAILED,
                context={"url": url, "method": verb, "reason": repr(e)},
            ) from e

        if res.status_code in AUTH_FAILURE_STATUSES:
            raise AuthenticationError(
                FailMessage.AUTH_REJECTED,
                context={
                    "url": url,
                    "status": res.status_code,
                    "body": res.text[:BODY_EXCERPT_CHARS],
                },
            )
        if not res.is_success:
            raise HttpStatusError(
                FailMessage.UNEXPECTED_STATUS,
                context={
                    "url": url,
                    "status": res.status_code,
                    "body": res.text[:BODY_EXCERPT_CHARS],
                },
            )

        try:
            return res.json()
        except ValueError as e:
            raise DecodingError(
                FailMessage.INVALID_JSON,
                context={"url": url, "body": res.text[:BODY_EXCERPT_CHARS]},
            ) from e


class Anonymous(HttpAuth):
    """Unauthenticated requests. The default for `DiscoveryClient`."""


class ApiKey(HttpAuth):
    """
    Authenticate with an API key sent as the `key` query parameter.

    Example:
        >>> auth = ApiKey("AIza...")
        >>> client = DiscoveryClient(auth=auth)
    """

    def __init__(self, key: str, **kwargs):
        super().__init__(**kwargs)
        self.key = key

    def prepare(self, url, headers):
        return url.copy_add_param("key", self.key), headers


class AccessToken(HttpAuth):
    """Authenticate with an OAuth 2.0 bearer token obtained elsewhere."""

    def __init__(self, token: str, **kwargs):
        super().__init__(**kwargs)
        self.token = token

    def prepare(self, url, headers):
        return url, {**headers, "Authorization": f"Bearer {self.token}"}

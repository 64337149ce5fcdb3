"""
Client for the API discovery service.

This module defines `DiscoveryClient`, a thin asynchronous façade over a
`BaseAuth` capability. It performs exactly two read-only operations:

- `get_rest_description()`:  GET {base}apis/{api}/{version}/rest
- `list_apis()`:             GET {base}apis[?name=..&preferred=..]

Each call builds the request URL, delegates the request to the configured
auth object, and decodes the JSON body into a model from
`apidiscovery.models`.

Error handling:
- Operations are wrapped with `@handle_errors`, which logs a failure and
  re-raises the same exception. Transport, authentication, HTTP status and
  decoding errors reach the caller unchanged; nothing is retried.

State:
- The auth object and base URL are fixed at construction. The client keeps no
  per-call state, so concurrent calls on one instance are independent.
"""

import logging
from typing import Dict, Optional

import httpx

from .lib.auth.base import BaseAuth
from .lib.auth.credentials import Anonymous
from .lib.config import settings
from .lib.enums.http import HttpMethod
from .lib.errors.decorators import handle_errors
from .models import DirectoryListing, RestDescription

logger = logging.getLogger(__name__)


def _query_value(value: object) -> str:
    """
    Coerce a query option to the string form sent on the wire.

    Booleans are written as JSON literals (`true` / `false`), matching what
    the discovery endpoint expects; everything else goes through `str()`.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class DiscoveryClient:
    """
    Retrieves discovery documents and the directory of known APIs.

    Attributes:
        auth: The `BaseAuth` capability performing HTTP requests.
        base_url: Root of the discovery endpoint, ending with a slash.

    Example:
        >>> client = DiscoveryClient()
        >>> doc = await client.get_rest_description("drive", "v3")
        >>> doc.schemas["File"].properties["name"].type
        'string'
    """

    def __init__(self, auth: Optional[BaseAuth] = None, base_url: Optional[str] = None):
        """
        Args:
            auth: Authentication capability. Defaults to `Anonymous()`.
            base_url: Discovery endpoint root. Defaults to
                `settings.discovery_base_url`. Paths are appended directly,
                so the value should end with "/".
        """
        self._auth = auth if auth is not None else Anonymous()
        self._base_url = base_url if base_url is not None else settings.discovery_base_url

    @property
    def auth(self) -> BaseAuth:
        return self._auth

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(auth={self._auth.__class__.__name__}, base_url={self._base_url!r})"

    @handle_errors()
    async def get_rest_description(self, api: str, version: str) -> RestDescription:
        """
        Retrieve the description of a particular version of an API.

        `api` and `version` are inserted into the path as given; unknown or
        malformed values are left for the endpoint to reject.

        Args:
            api: The name of the API, e.g. "drive".
            version: The version of the API, e.g. "v3".

        Returns:
            The decoded `RestDescription`. A new network round trip is made
            on every call.

        Raises:
            Whatever the auth capability raises, unchanged, and
            `pydantic.ValidationError` when the body does not fit the model.
        """
        logger.debug(f"Fetching discovery document for {api}/{version}")
        url = httpx.URL(f"{self._base_url}apis/{api}/{version}/rest")
        data = await self._auth.request(str(url), HttpMethod.GET)
        return RestDescription.from_json_dict(data)

    @handle_errors()
    async def list_apis(
        self,
        name: Optional[str] = None,
        preferred: Optional[bool] = None,
    ) -> DirectoryListing:
        """
        Retrieve the list of APIs supported at this endpoint.

        A query parameter is added only for an option that is not `None`, so
        `preferred=False` is sent as `preferred=false` while omitting the
        option sends nothing.

        Args:
            name: Only include APIs with the given name.
            preferred: Return only the preferred version of each API.

        Returns:
            The decoded `DirectoryListing`.
        """
        logger.debug(f"Listing APIs (name={name!r}, preferred={preferred!r})")
        params: Dict[str, str] = {}
        if name is not None:
            params["name"] = _query_value(name)
        if preferred is not None:
            params["preferred"] = _query_value(preferred)

        url = httpx.URL(f"{self._base_url}apis")
        if params:
            url = url.copy_merge_params(params)
        data = await self._auth.request(str(url), HttpMethod.GET)
        return DirectoryListing.from_json_dict(data)

"""
Abstract authentication/transport capability used by `DiscoveryClient`.

`BaseAuth` is the only contract the client depends on: perform one HTTP
request for a fully formed URL and return the parsed JSON body. Credential
schemes, connection handling, timeouts and error classification all live
behind it, so the client's URL construction never changes when a different
scheme is plugged in.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..enums.http import HttpMethod


class BaseAuth(ABC):
    """
    Interface for authenticated HTTP request execution.

    Design contract:
        - `request()` performs exactly one request and returns the decoded
          JSON body on a 2xx response.
        - Failures raise a distinguishable error: `TransportError`,
          `AuthenticationError`, `HttpStatusError` or `DecodingError` for the
          bundled implementations. Custom implementations may raise their own
          exceptions; callers of `DiscoveryClient` receive them unchanged.
        - No request body is sent by `DiscoveryClient`.

    Example:
        >>> class Canned(BaseAuth):
        ...     async def request(self, url, method=HttpMethod.GET):
        ...         return {"kind": "discovery#directoryList"}
    """

    @abstractmethod
    async def request(self, url: str, method: HttpMethod | str = HttpMethod.GET) -> Any:
        """
        Perform an HTTP request and return the parsed JSON response.

        Args:
            url: Fully formed request URL, query string included.
            method: HTTP method to use.

        Returns:
            The decoded JSON body (usually a dict).

        Raises:
            NotImplementedError: If a subclass does not implement this method.
        """
        raise NotImplementedError("Auth subclasses must implement request().")

"""
HTTP method identifiers used by the authentication/transport layer.

`DiscoveryClient` only ever issues `GET`, but `BaseAuth.request()` accepts any
member so credential implementations stay usable for other read/write calls.
"""

from .common import AutoStrEnum


class HttpMethod(AutoStrEnum):
    """HTTP verbs accepted by `BaseAuth.request()`."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

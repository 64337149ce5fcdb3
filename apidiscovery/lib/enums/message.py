"""
Standardized failure messages raised by the transport and reference helpers.

Using a single enum keeps error text consistent between the exceptions the
library raises and the log lines emitted by `AppError.log()`.
"""

from .common import AutoStrEnum


class FailMessage(AutoStrEnum):
    """
    Failure message constants.

    Each value is used as the `message` of the matching `AppError` subclass;
    details (URL, status, body excerpt) travel in the error's `context`.
    """

    TRANSPORT_FAILED = "Request to discovery endpoint failed"
    AUTH_REJECTED = "Credentials rejected by discovery endpoint"
    UNEXPECTED_STATUS = "Unexpected status from discovery endpoint"
    INVALID_JSON = "Response body is not valid JSON"
    UNRESOLVED_REF = "Schema reference does not resolve"
    INVALID_TIMEOUT = "DISCOVERY_HTTP_TIMEOUT must be a positive number"

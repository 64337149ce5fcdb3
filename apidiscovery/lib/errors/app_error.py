# lib/errors/app_error.py
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def log(self) -> None:
        logger.error(f"{self.__class__.__name__}: {self.message}", extra=self.context)


class ConfigError(AppError):
    pass


class NetworkError(AppError):
    pass


class TransportError(NetworkError):
    """Connection, DNS or timeout failure; the httpx error is the __cause__."""


class AuthenticationError(NetworkError):
    """The endpoint answered 401 or 403."""


class HttpStatusError(NetworkError):
    """Any other non-2xx answer. `context["status"]` holds the code."""

    @property
    def status(self) -> int | None:
        return self.context.get("status")


class DecodingError(NetworkError):
    pass


class ValidationError(AppError):
    pass


class UnresolvedReferenceError(ValidationError):
    pass

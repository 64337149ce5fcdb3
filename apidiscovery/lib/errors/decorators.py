"""
Error-logging decorator for synchronous and asynchronous functions.

This module defines `handle_errors`, applied to the public operations of
`DiscoveryClient` so that every failure is recorded once, at the boundary
where the caller receives it.

The decorator never alters control flow: the exception that reached it is
re-raised as the same object, so callers can match on transport, HTTP status,
authentication or decoding errors exactly as the transport layer raised them.
"""

import functools
import inspect
import logging
from typing import Callable

from .app_error import AppError

logger = logging.getLogger(__name__)


def handle_errors(*, log: bool = True) -> Callable:
    """
    Decorator factory for unified error logging.

    Error handling rules:
        - If an `AppError` is raised, optionally log it via `AppError.log()`.
        - If any other `Exception` is raised (for example a
          `pydantic.ValidationError` while decoding a response), optionally
          log the full stack trace.
        - In both cases the original exception is re-raised unchanged.

    Args:
        log: Whether to log caught exceptions before re-raising them.

    Returns:
        A decorator that wraps the target function.

    Example:
        >>> @handle_errors()
        ... async def fetch_document():
        ...     ...
    """

    def _report(func: Callable, exc: Exception) -> None:
        if not log:
            return
        if isinstance(exc, AppError):
            exc.log()
        else:
            logger.exception(f"Unexpected error in {func.__name__}: {exc}")

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _report(func, e)
                    raise

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _report(func, e)
                raise

        return sync_wrapper

    return decorator

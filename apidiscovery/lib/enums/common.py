"""
String-compatible Enum base class.

This module defines `AutoStrEnum`, the base for enums whose members are sent
over the wire or written to logs as plain strings (HTTP verbs, error
messages). Members compare equal to their raw string values.
"""

from enum import Enum


class AutoStrEnum(str, Enum):
    """
    String-compatible Enum base with natural string behavior.

    Example:
        >>> class Verb(AutoStrEnum):
        ...     GET = "GET"
        >>>
        >>> Verb.GET == "GET"
        True
        >>> f"{Verb.GET} /apis"
        'GET /apis'
    """

    def __str__(self) -> str:
        """
        Return the enum value as a string.

        `str(member)` yields the raw value instead of `ClassName.MEMBER`, which
        keeps URLs, headers and log lines readable.
        """
        return str(self.value)

"""mtgdb.errors

Exceptions raised by :class:`mtgdb.client.MtgDbClient`.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "MtgDbError",
    "InvalidArgumentError",
    "TransportError",
    "DecodeError",
]


class MtgDbError(Exception):
    """Base exception for mtgdb.info client errors"""
    pass


class InvalidArgumentError(MtgDbError, ValueError):
    """Raised before any request when a required argument is missing or invalid"""

    def __init__(self, argument: str, message: str = "Cannot be null or blank"):
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class TransportError(MtgDbError):
    """Raised on connection failures and non-success HTTP statuses"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{message} ({url})")


class DecodeError(MtgDbError):
    """Raised when a response body is not JSON or has the wrong shape"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{message} ({url})")

"""Exceptions raised by the GIGA subscriptions client."""
from __future__ import annotations

from typing import Any, Dict, Optional


class GigaSubscriptionsError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(GigaSubscriptionsError, ValueError):
    """The client is missing configuration it needs, e.g. the pre-shared key."""


class ArgumentError(GigaSubscriptionsError, ValueError):
    """An unknown API method was requested."""


class GigaSubscriptionsHTTPError(GigaSubscriptionsError):
    """A call failed on the network or was rejected by the server.

    Only raised when the client is not in no-throw mode, except for
    transport failures which are always raised.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.payload: Dict[str, Any] = payload or {}
        self.method = method
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @property
    def hash(self) -> Optional[str]:
        """Contact hash sent along with ``Authentication Required`` errors."""
        return self.payload.get("hash")


class NetworkError(GigaSubscriptionsHTTPError):
    """No HTTP status could be obtained, or the server answered with a 5xx."""


class RequestError(GigaSubscriptionsHTTPError):
    """The server rejected the request with a 4xx status."""


class UnknownError(GigaSubscriptionsHTTPError):
    """Any other non-2xx status."""

"""Python client for the GIGA email subscriptions API."""

from .client import GigaSubscriptions, request
from .config import Configuration
from .errors import (
    ArgumentError,
    ConfigurationError,
    GigaSubscriptionsError,
    GigaSubscriptionsHTTPError,
    NetworkError,
    RequestError,
    UnknownError,
)
from .types import Method
from . import types

__all__ = [
    "GigaSubscriptions",
    "request",
    "Configuration",
    "Method",
    "types",
    "GigaSubscriptionsError",
    "GigaSubscriptionsHTTPError",
    "ConfigurationError",
    "ArgumentError",
    "NetworkError",
    "RequestError",
    "UnknownError",
]

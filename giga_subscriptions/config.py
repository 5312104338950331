"""Client configuration for the GIGA subscriptions API."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .errors import ConfigurationError


DEFAULT_ENDPOINT = "https://crm.giga-hamburg.de/civicrm/giga-subscriptions-api"
DEFAULT_TIMEOUT = 30.0

ENDPOINT_ENV = "GIGA_SUBSCRIPTIONS_API_ENDPOINT"
PSK_ENV = "GIGA_SUBSCRIPTIONS_API_PSK"
NO_THROW_ENV = "GIGA_SUBSCRIPTIONS_API_NO_THROW"
TIMEOUT_ENV = "GIGA_SUBSCRIPTIONS_API_TIMEOUT"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Configuration:
    """Immutable settings shared by every call a client makes.

    Parameters
    ----------
    endpoint:
        Full URL of the subscriptions API endpoint.
    psk:
        Pre-shared key. Must match the one configured on the API server.
    no_throw:
        When true, API errors are returned as ``{"error": ...}`` instead of
        being raised.
    timeout:
        Seconds to wait for the server before giving up.
    """

    endpoint: str = DEFAULT_ENDPOINT
    psk: Optional[str] = field(default=None, repr=False)
    no_throw: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, **overrides: Any) -> "Configuration":
        """Build a configuration from ``GIGA_SUBSCRIPTIONS_API_*`` variables.

        Keyword arguments override whatever the environment provides.
        """
        values: dict = {}
        endpoint = os.getenv(ENDPOINT_ENV)
        if endpoint:
            values["endpoint"] = endpoint
        psk = os.getenv(PSK_ENV)
        if psk:
            values["psk"] = psk
        no_throw = os.getenv(NO_THROW_ENV)
        if no_throw is not None:
            values["no_throw"] = _parse_bool(NO_THROW_ENV, no_throw)
        timeout = os.getenv(TIMEOUT_ENV)
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV} must be a number of seconds, got {timeout!r}"
                ) from e

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **changes: Any) -> "Configuration":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def require_psk(self) -> str:
        if not self.psk:
            raise ConfigurationError(
                f"Missing pre-shared key. Pass Configuration(psk=...) or set {PSK_ENV} "
                "to match the key on the API server."
            )
        return self.psk


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {value!r}")

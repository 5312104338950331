"""Core client for interacting with the GIGA subscriptions API.

Every call goes to a single endpoint; the remote method is selected with the
``method`` query parameter and the client authenticates with a pre-shared key
sent as ``psk``.

By default the client runs in no-throw mode: API errors come back as
``{"error": "..."}`` and callers should always check for that key. Pass
``no_throw=False`` to get ``RequestError``/``NetworkError``/``UnknownError``
raised instead.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Union
from urllib.parse import urlencode

import requests

from .config import Configuration
from .errors import (
    ArgumentError,
    GigaSubscriptionsHTTPError,
    NetworkError,
    RequestError,
    UnknownError,
)
from .types import (
    APIError,
    ContactAuth,
    ContactData,
    ContactDataUpdate,
    ContactHash,
    ContactHashRequest,
    HTTPVerb,
    Method,
    QueryValue,
    SubscriberCreate,
)


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


class _Outcome(NamedTuple):
    status_code: int
    data: Optional[Dict[str, Any]]
    error: Optional[APIError]


class GigaSubscriptions:
    """GIGA subscriptions API client.

    Parameters
    ----------
    config:
        Client configuration. If not provided, it is read from the
        ``GIGA_SUBSCRIPTIONS_API_*`` environment variables.
    psk, endpoint, no_throw, timeout:
        Optional overrides applied on top of ``config``.
    session:
        ``requests.Session`` to send requests with (useful for testing).
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        *,
        psk: Optional[str] = None,
        endpoint: Optional[str] = None,
        no_throw: Optional[bool] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        overrides = {
            k: v
            for k, v in {
                "psk": psk,
                "endpoint": endpoint,
                "no_throw": no_throw,
                "timeout": timeout,
            }.items()
            if v is not None
        }
        if config is None:
            config = Configuration.from_env(**overrides)
        elif overrides:
            config = config.with_overrides(**overrides)
        config.require_psk()

        self.config = config
        self._session = session or requests.Session()

        self.contacts = Contacts(self)
        self.subscribers = Subscribers(self)

    # ------------------------------------------------------------------
    # Internal request helper
    # ------------------------------------------------------------------
    def _request(
        self,
        verb: HTTPVerb,
        query: Mapping[str, QueryValue],
        body: Optional[Mapping[str, Any]] = None,
    ) -> _Outcome:
        """Perform one HTTP request and return its normalised outcome."""
        query = dict(query)
        remote_method = query.get("method")
        query["psk"] = self.config.psk
        url = f"{self.config.endpoint}?{_encode_query(query)}"

        headers: Dict[str, str] = {}
        data: Optional[bytes] = None
        if body:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE
            headers["Content-Length"] = str(len(data))

        logger.debug("%s %s method=%s", verb, self.config.endpoint, remote_method)
        try:
            resp = self._session.request(
                verb,
                url,
                data=data,
                headers=headers,
                timeout=self.config.timeout,
                verify=True,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            # The exception text embeds the request URL, psk included.
            logger.error(
                "No response from %s for method=%s: %s",
                self.config.endpoint,
                remote_method,
                type(e).__name__,
            )
            raise NetworkError(
                f"Network error. No HTTP status received for {remote_method} ({type(e).__name__})",
                method=remote_method,
            ) from e

        payload = _decode(resp)
        if str(resp.status_code).startswith("2"):
            return _Outcome(resp.status_code, payload, None)

        if payload.get("error") is not None:
            error: APIError = payload  # type: ignore[assignment]
        else:
            error = {"error": f"Unknown error {resp.status_code}"}
        logger.warning(
            "Subscriptions API method=%s failed: %s %s",
            remote_method,
            resp.status_code,
            error["error"],
        )
        return _Outcome(resp.status_code, None, error)

    def call(
        self,
        verb: HTTPVerb,
        query: Mapping[str, QueryValue],
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send one request and return the decoded response.

        In no-throw mode errors are returned as a dict with an ``error`` key.
        Otherwise they are raised according to the status code. Transport
        failures always raise ``NetworkError``.
        """
        outcome = self._request(verb, query, body)
        if outcome.error is None:
            return outcome.data or {}
        if self.config.no_throw:
            return dict(outcome.error)
        raise _error_for(outcome, query.get("method"))

    # ------------------------------------------------------------------
    # Verb helpers
    # ------------------------------------------------------------------
    def get(self, method: Method, params: Mapping[str, Any]) -> Dict[str, Any]:
        query: Dict[str, Any] = {"method": method.value}
        for key, value in params.items():
            query.setdefault(key, value)
        return self.call("GET", query)

    def post(
        self, method: Method, query: Mapping[str, Any], body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return self.call("POST", {"method": method.value, **query}, body)

    # ------------------------------------------------------------------
    # Remote methods
    # ------------------------------------------------------------------
    def get_contact_data(self, params: ContactAuth) -> Union[ContactData, APIError]:
        return self.contacts.get_data(params)

    def set_contact_data(self, params: ContactDataUpdate) -> Dict[str, Any]:
        return self.contacts.set_data(params)

    def get_contact_hash(self, params: ContactHashRequest) -> Union[ContactHash, APIError]:
        return self.contacts.get_hash(params)

    def add_subscriber(self, params: SubscriberCreate) -> Dict[str, Any]:
        return self.subscribers.add(params)

    def dispatch(self, method: Union[Method, str], params: Mapping[str, Any]) -> Dict[str, Any]:
        """Call ``method`` by name, e.g. ``client.dispatch("getContactHash", {...})``."""
        return _ROUTES[_parse_method(method)](self, params)


def request(
    method: Union[Method, str],
    params: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[Configuration] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Make a single API call.

    ``method`` must be one of ``getContactData``, ``setContactData``,
    ``getContactHash`` or ``addSubscriber``; anything else raises
    ``ArgumentError`` whatever the configuration. A missing pre-shared key
    raises ``ConfigurationError``.

    Example
    -------
    ```python
    result = request("getContactHash", {"email": "wilma@example.com"})
    if result.get("error"):
        ...
    ```
    """
    remote = _parse_method(method)
    client = GigaSubscriptions(config, session=session)
    return client.dispatch(remote, params or {})


def _parse_method(method: Union[Method, str]) -> Method:
    try:
        return Method(method)
    except ValueError:
        raise ArgumentError(f"Unimplemented method, '{method}'") from None


def _encode_query(query: Mapping[str, QueryValue]) -> str:
    """Form-encode ``query``, dropping ``None`` and sending booleans as 1/0."""
    pairs = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = int(value)
        pairs.append((key, value))
    return urlencode(pairs)


def _decode(resp: requests.Response) -> Dict[str, Any]:
    if not resp.content:
        return {}
    try:
        payload = resp.json()
    except ValueError:
        logger.debug("Ignoring non-JSON response body (status %s)", resp.status_code)
        return {}
    if not isinstance(payload, dict):
        logger.debug("Ignoring non-object JSON response body (status %s)", resp.status_code)
        return {}
    return payload


def _error_for(outcome: _Outcome, method: Optional[Any]) -> GigaSubscriptionsHTTPError:
    error = outcome.error or {"error": f"Unknown error {outcome.status_code}"}
    leading = str(outcome.status_code)[:1]
    if leading == "4":
        cls = RequestError
    elif leading == "5":
        cls = NetworkError
    else:
        cls = UnknownError
    return cls(
        str(error["error"]),
        status_code=outcome.status_code,
        payload=dict(error),
        method=method,
    )


# Import here to avoid circular dependency during type checking
from .contacts import Contacts  # noqa: E402  pylint: disable=wrong-import-position
from .subscribers import Subscribers  # noqa: E402  pylint: disable=wrong-import-position


_ROUTES: Dict[Method, Callable[[GigaSubscriptions, Mapping[str, Any]], Dict[str, Any]]] = {
    Method.GET_CONTACT_DATA: GigaSubscriptions.get_contact_data,  # type: ignore[dict-item]
    Method.SET_CONTACT_DATA: GigaSubscriptions.set_contact_data,  # type: ignore[dict-item]
    Method.GET_CONTACT_HASH: GigaSubscriptions.get_contact_hash,  # type: ignore[dict-item]
    Method.ADD_SUBSCRIBER: GigaSubscriptions.add_subscriber,  # type: ignore[dict-item]
}

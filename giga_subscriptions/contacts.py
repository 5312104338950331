"""Contact resource client: get and update a contact authenticated by its hash."""
from __future__ import annotations

from typing import Any, Dict, Union

from .types import (
    APIError,
    ContactAuth,
    ContactData,
    ContactDataUpdate,
    ContactHash,
    ContactHashRequest,
    Method,
)


class Contacts:
    """Client for the contact methods, authenticated by email and contact hash."""

    def __init__(self, client: "GigaSubscriptions") -> None:
        self.client = client

    def get_data(self, params: ContactAuth) -> Union[ContactData, APIError]:
        """Fetch contact details and subscription flags.

        ``params`` needs ``email`` and ``hash``. Possible errors are
        ``Unauthorised. Invalid hash.``, ``Bad Request. email missing`` and
        ``Bad Request. Problem with input email`` (email not found, or shared
        by two or more contacts).
        """
        return self.client.get(Method.GET_CONTACT_DATA, params)  # type: ignore[return-value]

    def set_data(self, params: ContactDataUpdate) -> Dict[str, Any]:
        """Update contact details and subscriptions.

        ``email`` and ``hash`` identify the contact and travel in the query
        string as well as the body. Other keys are optional and left unchanged
        when absent; subscription flags take 1 (subscribe) or 0 (unsubscribe).
        Returns ``{}`` on success. Besides the errors of :meth:`get_data` the
        server may answer ``Bad Request. Unknown prefix``.
        """
        query = {"hash": params.get("hash"), "email": params.get("email")}
        return self.client.post(Method.SET_CONTACT_DATA, query, params)

    def get_hash(self, params: ContactHashRequest) -> Union[ContactHash, APIError]:
        """Get the hash for ``email`` so an authentication link can be sent."""
        return self.client.get(Method.GET_CONTACT_HASH, params)  # type: ignore[return-value]


from .client import GigaSubscriptions  # noqa: E402  pylint: disable=wrong-import-position

"""Subscriber resource client."""
from __future__ import annotations

from typing import Any, Dict

from .types import Method, SubscriberCreate


class Subscribers:
    """Client for adding new subscribers (no contact hash needed)."""

    def __init__(self, client: "GigaSubscriptions") -> None:
        self.client = client

    def add(self, params: SubscriberCreate) -> Dict[str, Any]:
        """Create a contact from ``params``; the address goes in ``new_email``.

        If the contact already exists the server answers
        ``Authentication Required`` together with the contact's ``hash`` so
        that an authentication link can be emailed instead.
        """
        return self.client.post(Method.ADD_SUBSCRIBER, {}, params)


from .client import GigaSubscriptions  # noqa: E402  pylint: disable=wrong-import-position

from __future__ import annotations

import logging
import os
import sys
from urllib.parse import urlencode

from giga_subscriptions import Configuration, GigaSubscriptions
from giga_subscriptions.types import SUBSCRIPTION_FLAGS


PREFERENCES_PAGE = os.getenv("PREFERENCES_PAGE", "https://your-web-server.com/subscription-updates")


def main(email: str) -> None:
    logging.basicConfig(level=logging.DEBUG)
    client = GigaSubscriptions(Configuration.from_env(no_throw=True))

    result = client.get_contact_hash({"email": email})
    if result.get("error"):
        print("Could not get hash:", result["error"])
        return

    print("Authentication link:", f"{PREFERENCES_PAGE}?{urlencode({'email': email, 'hash': result['hash']})}")

    contact = client.get_contact_data({"email": email, "hash": result["hash"]})
    print("Contact:", contact.get("first_name"), contact.get("last_name"))
    subscribed = [flag for flag in SUBSCRIPTION_FLAGS if int(contact.get(flag) or 0)]
    print("Subscribed to:", ", ".join(subscribed) or "nothing")

    update = client.set_contact_data(
        {"email": email, "hash": result["hash"], "giga_en_global": 1}
    )
    print("Update:", update or "OK")

    added = client.add_subscriber({"new_email": email, "events": 1, "first_name": "Wilma"})
    if added.get("error") == "Authentication Required":
        print("Already subscribed; send the link above instead. Hash:", added.get("hash"))


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "wilma@example.com")

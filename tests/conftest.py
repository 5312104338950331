import json
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

import pytest

from giga_subscriptions import Configuration, GigaSubscriptions


ENDPOINT = "https://api.example.org/civicrm/giga-subscriptions-api"
PSK = "aabbccddeeff"


class FakeResponse:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content

    def json(self) -> Any:
        return json.loads(self.content.decode("utf-8"))


class FakeSession:
    """Records requests and replays a canned response or exception."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.response: Optional[FakeResponse] = FakeResponse(200, b"{}")
        self.exception: Optional[Exception] = None

    def respond(self, status_code: int, body: Any = None) -> None:
        if body is None:
            content = b""
        elif isinstance(body, bytes):
            content = body
        else:
            content = json.dumps(body).encode("utf-8")
        self.response = FakeResponse(status_code, content)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.exception is not None:
            raise self.exception
        assert self.response is not None
        return self.response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]

    @property
    def last_query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.last["url"]).query, keep_blank_values=True)

    @property
    def last_body(self) -> Any:
        data = self.last["data"]
        return None if data is None else json.loads(data.decode("utf-8"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GIGA_SUBSCRIPTIONS_API_ENDPOINT",
        "GIGA_SUBSCRIPTIONS_API_PSK",
        "GIGA_SUBSCRIPTIONS_API_NO_THROW",
        "GIGA_SUBSCRIPTIONS_API_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def config() -> Configuration:
    return Configuration(endpoint=ENDPOINT, psk=PSK, no_throw=True)


@pytest.fixture
def client(config: Configuration, session: FakeSession) -> GigaSubscriptions:
    return GigaSubscriptions(config, session=session)  # type: ignore[arg-type]


@pytest.fixture
def throwing_client(config: Configuration, session: FakeSession) -> GigaSubscriptions:
    return GigaSubscriptions(config, no_throw=False, session=session)  # type: ignore[arg-type]

from __future__ import annotations

import pytest
import requests

from congress import TransportError
from congress import transport as transport_module
from congress.transport import API_KEY_HEADER, Transport


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code


def test_get_joins_endpoint_and_path_and_sends_api_key(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return FakeResponse(b'{"status": "OK"}')

    monkeypatch.setattr(transport_module.requests, "get", fake_get)

    body = Transport("https://api.example.org/congress/v1", "secret").get("/115/senate/members.json")

    assert body == b'{"status": "OK"}'
    assert calls == [
        ("https://api.example.org/congress/v1/115/senate/members.json", {API_KEY_HEADER: "secret"}, None)
    ]


def test_trailing_slash_on_endpoint_is_dropped():
    transport = Transport("https://api.example.org/v1/", "secret")
    assert transport.url_for("/members/new.json") == "https://api.example.org/v1/members/new.json"


def test_timeout_is_passed_through(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen["timeout"] = timeout
        return FakeResponse(b"{}")

    monkeypatch.setattr(transport_module.requests, "get", fake_get)
    Transport("https://api.example.org", "secret", timeout=2.5).get("/members/new.json")
    assert seen["timeout"] == 2.5


def test_non_2xx_body_is_returned_unchanged(monkeypatch):
    monkeypatch.setattr(
        transport_module.requests, "get", lambda url, headers=None, timeout=None: FakeResponse(b"Forbidden", 403)
    )
    assert Transport("https://api.example.org", "bad").get("/members/new.json") == b"Forbidden"


@pytest.mark.parametrize(
    "exc",
    [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.ChunkedEncodingError("body cut short"),
    ],
)
def test_network_failures_raise_transport_error(monkeypatch, exc):
    def fake_get(url, headers=None, timeout=None):
        raise exc

    monkeypatch.setattr(transport_module.requests, "get", fake_get)

    with pytest.raises(TransportError) as info:
        Transport("https://api.example.org", "secret").get("/members/new.json")

    assert info.value.url == "https://api.example.org/members/new.json"
    assert info.value.__cause__ is exc


def test_malformed_endpoint_raises_transport_error():
    with pytest.raises(TransportError):
        Transport("not a url", "secret").get("/members/new.json")


def test_api_key_is_hidden_from_repr():
    assert "secret" not in repr(Transport("https://api.example.org", "secret"))


def test_transport_is_immutable():
    transport = Transport("https://api.example.org", "secret")
    with pytest.raises(AttributeError):
        transport.api_key = "other"


def test_from_env_reads_key_endpoint_and_timeout(monkeypatch):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "env-key")
    monkeypatch.setenv("CONGRESS_API_ENDPOINT", "https://mirror.example.org/v1")
    monkeypatch.setenv("CONGRESS_API_TIMEOUT", "10")

    transport = Transport.from_env()

    assert transport.api_key == "env-key"
    assert transport.endpoint == "https://mirror.example.org/v1"
    assert transport.timeout == 10.0


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("PROPUBLICA_API_KEY", raising=False)
    monkeypatch.setenv("CONGRESS_API_KEY", "fallback-key")
    monkeypatch.delenv("CONGRESS_API_ENDPOINT", raising=False)
    monkeypatch.delenv("CONGRESS_API_TIMEOUT", raising=False)

    transport = Transport.from_env()

    assert transport.api_key == "fallback-key"
    assert transport.endpoint == "https://api.propublica.org/congress/v1"
    assert transport.timeout is None


def test_from_env_without_key_raises(monkeypatch):
    monkeypatch.delenv("PROPUBLICA_API_KEY", raising=False)
    monkeypatch.delenv("CONGRESS_API_KEY", raising=False)

    with pytest.raises(ValueError, match="PROPUBLICA_API_KEY"):
        Transport.from_env()


def test_non_numeric_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "env-key")
    monkeypatch.setenv("CONGRESS_API_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="CONGRESS_API_TIMEOUT"):
        Transport.from_env()


@pytest.mark.parametrize("timeout", [0, -1])
def test_unusable_timeout_raises_transport_error(timeout):
    with pytest.raises(TransportError):
        Transport("https://api.example.org", "secret", timeout=timeout).get("/members/new.json")


@pytest.mark.parametrize("raw", ["0", "-5", "inf", "nan"])
def test_non_positive_or_non_finite_timeout_is_rejected(monkeypatch, raw):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "env-key")
    monkeypatch.setenv("CONGRESS_API_TIMEOUT", raw)

    with pytest.raises(ValueError, match="positive"):
        Transport.from_env()

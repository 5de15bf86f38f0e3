"""Unit tests for session cookie encoding/decoding."""

from __future__ import annotations

import pytest

from subshare.core.sessions.cookies import CookieSerializer
from subshare.core.sessions.store import new_session_id

pytestmark = pytest.mark.unit

DOMAIN = ".mysite.localhost"


@pytest.fixture()
def serializer():
    return CookieSerializer(domain=DOMAIN, cookie_name="SESSION")


def test_encode_emits_parent_domain_cookie(serializer):
    header = serializer.encode("abc123")

    assert header == "SESSION=abc123; Domain=.mysite.localhost; Path=/; HttpOnly"


def test_encode_keeps_leading_dot_on_explicit_domain(serializer):
    header = serializer.encode("abc123", ".example.test")

    assert "Domain=.example.test;" in header


def test_encode_bare_hostname_domain():
    serializer = CookieSerializer(domain="mysite.localhost")

    assert serializer.encode("id") == "SESSION=id; Domain=mysite.localhost; Path=/; HttpOnly"


def test_encode_signal_is_not_httponly(serializer):
    header = serializer.encode_signal("mycookie", "success")

    assert header == "mycookie=success; Domain=.mysite.localhost; Path=/"


def test_decode_reads_session_cookie(serializer):
    headers = {"Cookie": "theme=dark; SESSION=abc123; mycookie=success"}

    assert serializer.decode(headers) == "abc123"


def test_decode_takes_first_of_duplicate_cookies(serializer):
    headers = {"Cookie": "SESSION=first; SESSION=second"}

    assert serializer.decode(headers) == "first"


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Cookie": ""},
        {"Cookie": "SESSION="},
        {"Cookie": "other=value"},
        {"Cookie": ";;;===;"},
        {"Cookie": "garbage without pairs"},
        {"Cookie": "SESSION=세션"},
    ],
)
def test_decode_malformed_or_missing_yields_none(serializer, headers):
    assert serializer.decode(headers) is None


def test_decode_respects_configured_name():
    serializer = CookieSerializer(domain=DOMAIN, cookie_name="JSESSIONID")

    assert serializer.decode({"Cookie": "SESSION=a; JSESSIONID=b"}) == "b"


def test_decode_of_encoded_id_round_trips(serializer):
    session_id = new_session_id()
    set_cookie = serializer.encode(session_id)
    # A browser echoes back only the name=value pair.
    request_cookie = set_cookie.split(";", 1)[0]

    assert serializer.decode({"Cookie": request_cookie}) == session_id

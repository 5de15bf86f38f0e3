"""Shared constants and Set-Cookie helpers for the test suite."""

from __future__ import annotations

COOKIE_DOMAIN = ".mysite.localhost"
PARENT_BASE_URL = "http://mysite.localhost"
SUB_BASE_URL = "http://sub.mysite.localhost"


class FakeClock:
    """Manually advanced clock for idle-timeout tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def set_cookie_headers(response, name: str) -> list[str]:
    """All Set-Cookie header values for cookie ``name``."""
    return [h for h in response.headers.getlist("Set-Cookie") if h.split("=", 1)[0] == name]


def cookie_attrs(header: str) -> tuple[str, dict]:
    """Split a Set-Cookie value into its value and lower-cased attributes."""
    pair, *attrs = [part.strip() for part in header.split(";")]
    parsed = {}
    for attr in attrs:
        key, sep, value = attr.partition("=")
        parsed[key.lower()] = value if sep else True
    return pair.partition("=")[2], parsed

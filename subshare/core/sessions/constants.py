"""Session attribute and cookie constants."""

from __future__ import annotations

# Attribute written by /login and echoed by /
RANDOM_ATTRIBUTE = "random"

DEMO_COOKIE_SUCCESS = "success"
DEMO_COOKIE_FAIL = "fail"

COOKIE_PATH = "/"

# Bytes of entropy behind each session id (token_urlsafe -> 43 chars)
SESSION_ID_BYTES = 32

__all__ = [
    "RANDOM_ATTRIBUTE",
    "DEMO_COOKIE_SUCCESS",
    "DEMO_COOKIE_FAIL",
    "COOKIE_PATH",
    "SESSION_ID_BYTES",
]

"""Bridge between in-memory sessions and the HTTP cookie surface.

Set-Cookie values are built by hand: Werkzeug's ``dump_cookie`` strips a
leading dot from ``Domain``, and the parent-domain scope has to reach the
browser verbatim (``.mysite.localhost`` covers ``sub.mysite.localhost``).
"""

from __future__ import annotations

from typing import Mapping, Optional

from werkzeug.http import parse_cookie

from subshare.core.sessions.constants import COOKIE_PATH


class CookieSerializer:
    """Encodes session ids into ``Set-Cookie`` headers and decodes them back."""

    def __init__(self, domain: str, cookie_name: str = "SESSION", path: str = COOKIE_PATH):
        self.domain = domain
        self.cookie_name = cookie_name
        self.path = path

    def decode(self, headers: Mapping[str, str]) -> Optional[str]:
        """Return the session id from the ``Cookie`` header, or ``None``.

        The first cookie named ``cookie_name`` wins when several are sent.
        """
        raw = headers.get("Cookie")
        if not raw or not isinstance(raw, str):
            return None
        try:
            value = parse_cookie(raw).get(self.cookie_name)
        except UnicodeError:
            # Header text outside latin-1 never came off the wire intact.
            return None
        return value or None

    def encode(self, session_id: str, domain: Optional[str] = None) -> str:
        """``NAME=<id>; Domain=<domain>; Path=/; HttpOnly``"""
        return self._dump(self.cookie_name, session_id, domain or self.domain, httponly=True)

    def encode_signal(self, name: str, value: str) -> str:
        """Plain demo cookie scoped like the session cookie, readable by scripts."""
        return self._dump(name, value, self.domain, httponly=False)

    def _dump(self, name: str, value: str, domain: str, *, httponly: bool) -> str:
        parts = [f"{name}={value}"]
        if domain:
            parts.append(f"Domain={domain}")
        parts.append(f"Path={self.path}")
        if httponly:
            parts.append("HttpOnly")
        return "; ".join(parts)


__all__ = ["CookieSerializer"]

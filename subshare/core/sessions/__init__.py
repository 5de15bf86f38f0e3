"""Server-side sessions shared across subdomains through a parent-domain cookie."""

from subshare.core.sessions.cookies import CookieSerializer
from subshare.core.sessions.reaper import SessionReaper
from subshare.core.sessions.store import Session, SessionStore

__all__ = ["CookieSerializer", "Session", "SessionReaper", "SessionStore"]

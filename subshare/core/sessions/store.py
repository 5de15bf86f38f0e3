"""Process-local session store keyed by an opaque, unguessable session id."""

from __future__ import annotations

import logging
import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from subshare.core.sessions.constants import SESSION_ID_BYTES

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def new_session_id() -> str:
    """Return a URL-safe id backed by the OS CSPRNG."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def _short(session_id: str) -> str:
    return session_id[:8]


@dataclass
class Session:
    """Server-side state bound to a client through the session cookie."""

    id: str
    attributes: Dict[str, str] = field(default_factory=dict)
    created_at: float = 0.0
    last_accessed_at: float = 0.0


class SessionStore:
    """In-memory mapping SessionId -> Session guarded by a single lock.

    ``idle_timeout`` is in seconds; ``None`` or ``0`` keeps sessions until they
    are invalidated. Expired entries behave exactly like unknown ids.
    """

    def __init__(
        self,
        idle_timeout: Optional[float] = None,
        *,
        clock: Clock = time.time,
        id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self.idle_timeout = idle_timeout or None
        self._clock = clock
        self._id_factory = id_factory
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def _is_expired(self, session: Session, now: float) -> bool:
        if self.idle_timeout is None:
            return False
        return now - session.last_accessed_at > self.idle_timeout

    def _lookup(self, session_id: Optional[str], now: float) -> Optional[Session]:
        # Caller holds the lock.
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if self._is_expired(session, now):
            del self._sessions[session_id]
            logger.debug("session %s expired on lookup", _short(session_id))
            return None
        session.last_accessed_at = now
        return session

    def get_or_create(self, session_id: Optional[str]) -> Tuple[Session, bool]:
        """Return the session bound to ``session_id``, creating one if needed."""
        with self._lock:
            now = self._clock()
            session = self._lookup(session_id, now)
            if session is not None:
                return session, False

            new_id = self._id_factory()
            while new_id in self._sessions:
                new_id = self._id_factory()
            session = Session(id=new_id, created_at=now, last_accessed_at=now)
            self._sessions[new_id] = session
        logger.info("session %s created", _short(new_id))
        return session, True

    def get_if_exists(self, session_id: Optional[str]) -> Optional[Session]:
        """Return the bound session without ever creating one."""
        with self._lock:
            return self._lookup(session_id, self._clock())

    def set_attribute(self, session: Session, key: str, value: str) -> None:
        with self._lock:
            session.attributes[key] = value
            session.last_accessed_at = self._clock()

    def get_attribute(self, session: Session, key: str) -> Optional[str]:
        with self._lock:
            return session.attributes.get(key)

    def invalidate(self, session: Session) -> None:
        """Remove ``session`` from the store; unknown sessions are ignored."""
        with self._lock:
            removed = self._sessions.pop(session.id, None)
        if removed is not None:
            logger.info("session %s invalidated", _short(session.id))

    def reap_expired(self) -> int:
        """Drop every session idle for longer than ``idle_timeout``."""
        if self.idle_timeout is None:
            return 0
        with self._lock:
            now = self._clock()
            expired = [sid for sid, s in self._sessions.items() if self._is_expired(s, now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("reaped %d idle session(s)", len(expired))
        return len(expired)


__all__ = ["Session", "SessionStore", "new_session_id"]

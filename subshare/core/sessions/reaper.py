"""Background sweep that drops idle sessions."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from subshare.core.sessions.store import SessionStore

logger = logging.getLogger(__name__)


class SessionReaper:
    """Daemon thread calling ``store.reap_expired`` every ``interval`` seconds."""

    def __init__(self, store: SessionStore, interval: float = 60.0):
        self.store = store
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="session-reaper", daemon=True)
        self._thread.start()
        logger.debug("session reaper started interval=%ss", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def sweep(self) -> int:
        try:
            return self.store.reap_expired()
        except Exception:
            # Keep the loop alive; a failed sweep is retried next interval.
            logger.exception("session reap failed")
            return 0

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.sweep()


__all__ = ["SessionReaper"]

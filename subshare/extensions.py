"""Shared collaborators for the SubShare application.

Built once per app from its config and kept under ``app.extensions``.
"""

from __future__ import annotations

import atexit
import logging

from flask import Flask

from subshare.core.demo.handlers import DemoSettings
from subshare.core.sessions import CookieSerializer, SessionReaper, SessionStore

logger = logging.getLogger(__name__)


def init_extensions(app: Flask) -> None:
    config = app.config
    store = SessionStore(idle_timeout=config.get("SESSION_IDLE_TIMEOUT_SECONDS") or None)
    serializer = CookieSerializer(
        domain=config["SESSION_COOKIE_DOMAIN"],
        cookie_name=config.get("SESSION_ID_COOKIE_NAME") or "SESSION",
    )
    settings = DemoSettings(
        redirect_url=config["LOGIN_REDIRECT_URL"],
        demo_cookie_name=config.get("DEMO_COOKIE_NAME") or "mycookie",
    )

    app.extensions["session_store"] = store
    app.extensions["cookie_serializer"] = serializer
    app.extensions["demo_settings"] = settings

    reaper = SessionReaper(store, interval=float(config.get("SESSION_REAP_INTERVAL_SECONDS") or 60))
    app.extensions["session_reaper"] = reaper
    if config.get("SESSION_REAPER_ENABLED") and store.idle_timeout:
        reaper.start()
        logger.info("idle sessions expire after %ss", store.idle_timeout)
        atexit.register(reaper.stop, 1.0)

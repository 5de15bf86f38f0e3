"""Application configuration for SubShare."""

from __future__ import annotations

import os
from typing import Dict, Optional, Type

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOCAL_COOKIE_DOMAIN = ".mysite.localhost"
DEFAULT_REDIRECT_URL = "http://sub.mysite.localhost"


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class BaseConfig:
    """Base configuration loaded for all environments."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")

    # Parent domain the session cookie is scoped to (server.servlet.session.cookie.domain).
    SESSION_COOKIE_DOMAIN = _env_str("SESSION_COOKIE_DOMAIN")
    SESSION_ID_COOKIE_NAME = _env_str("SESSION_ID_COOKIE_NAME", "SESSION")
    DEMO_COOKIE_NAME = _env_str("DEMO_COOKIE_NAME", "mycookie")
    LOGIN_REDIRECT_URL = _env_str("LOGIN_REDIRECT_URL", DEFAULT_REDIRECT_URL)

    SESSION_IDLE_TIMEOUT_SECONDS = int(os.environ.get("SESSION_IDLE_TIMEOUT_SECONDS", "1800"))
    SESSION_REAPER_ENABLED = _env_flag("SESSION_REAPER_ENABLED", "true")
    SESSION_REAP_INTERVAL_SECONDS = float(os.environ.get("SESSION_REAP_INTERVAL_SECONDS", "60"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"
    SESSION_COOKIE_DOMAIN = BaseConfig.SESSION_COOKIE_DOMAIN or DEFAULT_LOCAL_COOKIE_DOMAIN


class TestingConfig(BaseConfig):
    TESTING = True
    SESSION_COOKIE_DOMAIN = _env_str("TEST_SESSION_COOKIE_DOMAIN", DEFAULT_LOCAL_COOKIE_DOMAIN)
    LOGIN_REDIRECT_URL = DEFAULT_REDIRECT_URL
    SESSION_ID_COOKIE_NAME = "SESSION"
    DEMO_COOKIE_NAME = "mycookie"
    SESSION_IDLE_TIMEOUT_SECONDS = 1800
    # Tests drive reaping explicitly instead of through the background thread.
    SESSION_REAPER_ENABLED = False


class ProductionConfig(BaseConfig):
    ENV = "production"


config_by_name: Dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    # CI pipelines set APP_ENV=ci; map to testing defaults.
    "ci": TestingConfig,
}

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from subshare import create_app
from subshare.core.sessions.store import SessionStore
from subshare.tests.helpers import COOKIE_DOMAIN, FakeClock


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (full app, test client)")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store(clock):
    return SessionStore(idle_timeout=60, clock=clock)


@pytest.fixture()
def app():
    """Per-test app; each one owns a fresh in-memory session store."""
    app = create_app("testing", SESSION_COOKIE_DOMAIN=COOKIE_DOMAIN)
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        ctx.pop()


@pytest.fixture()
def client(app):
    # Cookies are passed explicitly, the way a browser would for a parent-domain cookie.
    return app.test_client(use_cookies=False)


@pytest.fixture()
def session_store(app):
    return app.extensions["session_store"]

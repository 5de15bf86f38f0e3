"""Exit-code behaviour of the serve entry point."""

from __future__ import annotations

import pytest

from subshare.errors import ConfigMissing
from subshare.scripts import serve

pytestmark = pytest.mark.unit


class _FakeServer:
    def __init__(self):
        self.closed = False

    def serve_forever(self):
        raise KeyboardInterrupt

    def server_close(self):
        self.closed = True


def test_missing_config_exits_nonzero(monkeypatch):
    def fail(_env):
        raise ConfigMissing("SESSION_COOKIE_DOMAIN")

    monkeypatch.setattr(serve, "create_app", fail)

    assert serve.main(["--env", "production"]) == serve.EXIT_CONFIG_MISSING


def test_bind_failure_exits_nonzero(monkeypatch):
    def refuse(host, port, app, threaded):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(serve, "make_server", refuse)

    assert serve.main(["--env", "testing", "--port", "1"]) == serve.EXIT_BIND_FAILURE


def test_werkzeug_exit_on_bind_is_reported_as_bind_failure(monkeypatch):
    def exits(host, port, app, threaded):
        raise SystemExit(1)

    monkeypatch.setattr(serve, "make_server", exits)

    assert serve.main(["--env", "testing"]) == serve.EXIT_BIND_FAILURE


def test_clean_shutdown_exits_zero(monkeypatch):
    fake = _FakeServer()
    seen = {}

    def bind(host, port, app, threaded):
        seen.update(host=host, port=port, threaded=threaded)
        return fake

    monkeypatch.setattr(serve, "make_server", bind)

    assert serve.main(["--env", "testing", "--host", "0.0.0.0", "--port", "8081"]) == serve.EXIT_OK
    assert fake.closed is True
    assert seen == {"host": "0.0.0.0", "port": 8081, "threaded": True}


def test_port_defaults_from_environment(monkeypatch):
    fake = _FakeServer()
    seen = {}

    def bind(host, port, app, threaded):
        seen.update(host=host, port=port)
        return fake

    monkeypatch.setenv("FLASK_RUN_HOST", "127.0.0.2")
    monkeypatch.setenv("FLASK_RUN_PORT", "9090")
    monkeypatch.setattr(serve, "make_server", bind)

    assert serve.main(["--env", "testing"]) == serve.EXIT_OK
    assert seen == {"host": "127.0.0.2", "port": 9090}

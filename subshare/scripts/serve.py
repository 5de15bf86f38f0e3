"""Run the SubShare demo on the Werkzeug threaded server.

Usage examples:
    subshare-serve --port 8080
    APP_ENV=production SESSION_COOKIE_DOMAIN=.mysite.localhost subshare-serve
    python -m subshare.scripts.serve --host 0.0.0.0 --port 8081

Run one instance per subdomain on distinct ports when testing on a single host,
with ``mysite.localhost`` and ``sub.mysite.localhost`` mapped to 127.0.0.1 in
/etc/hosts. Sessions live in process memory, so both hostnames must reach the
same process for the second request to see the first one's session.
"""

from __future__ import annotations

import logging
import os
import sys

import click
from werkzeug.serving import make_server

from subshare import create_app
from subshare.errors import BindFailure, ConfigMissing

logger = logging.getLogger("subshare.serve")

EXIT_OK = 0
EXIT_BIND_FAILURE = 1
EXIT_CONFIG_MISSING = 2


def _bind(app, host: str, port: int):
    try:
        return make_server(host, port, app, threaded=True)
    except OSError as exc:
        raise BindFailure(host, port, exc.strerror or str(exc)) from exc
    except SystemExit as exc:
        # werkzeug exits the process when the socket cannot be bound.
        raise BindFailure(host, port, "address unavailable") from exc


@click.command("serve")
@click.option("--host", default=lambda: os.environ.get("FLASK_RUN_HOST", "127.0.0.1"), show_default="127.0.0.1")
@click.option("--port", type=int, default=lambda: int(os.environ.get("FLASK_RUN_PORT", "8080")), show_default="8080")
@click.option("--env", "env_name", default=None, help="Config name (development, testing, production)")
def serve_command(host: str, port: int, env_name: str | None) -> int:
    """Serve /login and / until interrupted."""
    try:
        app = create_app(env_name)
    except ConfigMissing as exc:
        logger.error("startup failed: %s", exc)
        click.echo(f"Configuration error: {exc}", err=True)
        return EXIT_CONFIG_MISSING

    logging.getLogger().setLevel(app.config.get("LOG_LEVEL", "INFO"))

    try:
        server = _bind(app, host, port)
    except BindFailure as exc:
        logger.error("startup failed: %s", exc)
        click.echo(str(exc), err=True)
        return EXIT_BIND_FAILURE

    logger.info("listening on http://%s:%d", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()
        reaper = app.extensions.get("session_reaper")
        if reaper is not None:
            reaper.stop(timeout=1.0)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``subshare-serve`` and ``python -m subshare.scripts.serve``."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    try:
        result = serve_command.main(args=argv, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        return 1
    return result if isinstance(result, int) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

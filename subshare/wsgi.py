"""WSGI entrypoint for SubShare (``gunicorn -c deploy/gunicorn.conf.py subshare.wsgi:app``)."""

from __future__ import annotations

from subshare import create_app

app = create_app()

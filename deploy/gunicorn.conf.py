"""
Gunicorn configuration for SubShare.
Settings come from environment variables so the same file serves local runs and containers.

Sessions are kept in process memory, so the default is a single gthread worker:
a second worker process would not see sessions created by the first.
"""

from __future__ import annotations

import logging
import os

# ===== Server Binding =====
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8080")
backlog = int(os.environ.get("GUNICORN_BACKLOG", "2048"))

# ===== Worker Settings =====
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", "1"))
threads = int(os.environ.get("GUNICORN_THREADS", "8"))

# ===== Timeout Settings =====
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "10"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

# ===== Logging Configuration =====
accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")  # stdout
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")    # stderr
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
capture_output = True

# ===== Server Mechanics =====
daemon = False
preload_app = False
proc_name = os.environ.get("GUNICORN_PROC_NAME", "subshare")


# ===== Lifecycle Hooks =====
def on_starting(server):
    """Called just before the master process is initialized."""
    logger = logging.getLogger(__name__)
    if workers > 1:
        logger.warning(
            "GUNICORN_WORKERS=%d: sessions are per-process and will not be shared between workers",
            workers,
        )
    logger.info(f"Gunicorn starting: workers={workers}, threads={threads}, worker_class={worker_class}")


def when_ready(server):
    """Called just after the server is started."""
    logger = logging.getLogger(__name__)
    logger.info(f"Gunicorn ready. Listening on {bind}")


def on_exit(server):
    """Called just before exiting Gunicorn."""
    logger = logging.getLogger(__name__)
    logger.info("Gunicorn exiting gracefully")

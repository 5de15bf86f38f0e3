"""HTTP controllers for the subdomain session demo."""

from __future__ import annotations

from flask import Blueprint, request

from subshare.core.demo import handlers
from subshare.core.demo.handlers import DemoSettings
from subshare.core.sessions.cookies import CookieSerializer
from subshare.core.sessions.store import SessionStore


def create_demo_bp(
    store: SessionStore,
    serializer: CookieSerializer,
    settings: DemoSettings,
) -> Blueprint:
    """Build the demo blueprint around explicitly supplied collaborators."""
    demo_bp = Blueprint("demo", __name__)

    @demo_bp.get("/login")
    def login():
        return handlers.login(request, store, serializer, settings)

    @demo_bp.get("/")
    def index():
        return handlers.index(request, store, serializer, settings)

    return demo_bp

"""Session create-and-redirect and session presence probe.

Both handlers take the request and their collaborators as arguments and
return a finished Werkzeug response; nothing is read from request-local
globals.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from werkzeug.wrappers import Request, Response

from subshare.core.sessions.constants import (
    DEMO_COOKIE_FAIL,
    DEMO_COOKIE_SUCCESS,
    RANDOM_ATTRIBUTE,
)
from subshare.core.sessions.cookies import CookieSerializer
from subshare.core.sessions.store import SessionStore

SUCCESS_PREFIX = "세션공유 성공 : "
FAILURE_BODY = "세션공유 실패!!"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"


@dataclass(frozen=True)
class DemoSettings:
    redirect_url: str
    demo_cookie_name: str = "mycookie"


def new_random_token() -> str:
    return str(uuid.uuid4())


def login(
    request: Request,
    store: SessionStore,
    serializer: CookieSerializer,
    settings: DemoSettings,
) -> Response:
    """Bind a session, stamp a fresh ``random`` and bounce to the sibling host."""
    session, _created = store.get_or_create(serializer.decode(request.headers))
    # Overwritten on every call; /login is intentionally not idempotent.
    store.set_attribute(session, RANDOM_ATTRIBUTE, new_random_token())

    response = Response(status=302)
    response.headers["Location"] = settings.redirect_url
    response.headers.add("Set-Cookie", serializer.encode(session.id))
    return response


def index(
    request: Request,
    store: SessionStore,
    serializer: CookieSerializer,
    settings: DemoSettings,
) -> Response:
    """Report whether the session made it across the subdomain hop."""
    token = None
    session = store.get_if_exists(serializer.decode(request.headers))
    if session is not None:
        token = store.get_attribute(session, RANDOM_ATTRIBUTE)

    if token:
        body, outcome = SUCCESS_PREFIX + token, DEMO_COOKIE_SUCCESS
    else:
        body, outcome = FAILURE_BODY, DEMO_COOKIE_FAIL

    response = Response(body, status=200, content_type=TEXT_CONTENT_TYPE)
    response.headers.add("Set-Cookie", serializer.encode_signal(settings.demo_cookie_name, outcome))
    return response


__all__ = ["DemoSettings", "login", "index", "SUCCESS_PREFIX", "FAILURE_BODY"]

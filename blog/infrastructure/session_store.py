# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cookie-backed session state.

The whole session lives in Flask's signed ``session`` cookie; nothing is kept
server-side. The only value this application stores there is the
``authenticated`` flag.
"""

from __future__ import annotations

from functools import wraps
from typing import Protocol

from flask import redirect, request, session, url_for

from blog.shared.logging import logger

AUTHENTICATED_KEY = "authenticated"


class SessionStore(Protocol):
    def is_authenticated(self) -> bool: ...
    def set_authenticated(self, value: bool) -> None: ...


class CookieSessionStore(SessionStore):
    def is_authenticated(self) -> bool:
        return bool(session.get(AUTHENTICATED_KEY, False))

    def set_authenticated(self, value: bool) -> None:
        session[AUTHENTICATED_KEY] = bool(value)


def login_required(store: SessionStore):
    def decorator(f):
        @wraps(f)
        def inner(*a, **kw):
            if not store.is_authenticated():
                logger.warning(
                    f"Unauthenticated {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                return redirect(url_for("auth.login"))
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["AUTHENTICATED_KEY", "CookieSessionStore", "SessionStore", "login_required"]

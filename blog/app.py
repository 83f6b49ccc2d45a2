# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from blog.container import Container
from blog.interfaces.http.views import register_template_helpers
from blog.shared.config import AppConfig, load_config
from blog.shared.logging import logger, setup_logging
from blog.shared.middleware.error_handler import configure_error_handling
from blog.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(debug_mode=config.debug_logging)

    container.database.create_tables()

    app = Flask(__name__, static_folder="static/css", static_url_path="/css")
    app.config.update(
        SECRET_KEY=config.session_key,
        SESSION_COOKIE_NAME="session",
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE=config.security.cookie_samesite,
        SESSION_COOKIE_SECURE=config.security.cookie_secure,
    )

    configure_error_handling(
        app,
        is_authenticated=container.session_store.is_authenticated,
        debug_mode=config.debug_logging,
    )
    configure_request_logging(app, debug_mode=config.debug_logging)
    register_template_helpers(app)

    app.register_blueprint(container.posts_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


__all__ = ["create_app"]

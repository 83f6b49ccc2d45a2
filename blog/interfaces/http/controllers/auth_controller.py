# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, request, url_for
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from blog.application.use_cases.users import AuthenticateUserUseCase
from blog.infrastructure.session_store import SessionStore
from blog.interfaces.http.dto.auth import LoginFormDTO
from blog.interfaces.http.views import LoginView, LogoutView, render
from blog.shared.errors import InfrastructureError
from blog.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        authenticate_use_case: AuthenticateUserUseCase,
        sessions: SessionStore,
    ) -> None:
        self._authenticate_use_case = authenticate_use_case
        self._sessions = sessions

    def login(self) -> Response:
        if request.method == "GET":
            return render(
                LoginView(page_title="Log in", authenticated=self._sessions.is_authenticated())
            )

        try:
            dto = LoginFormDTO.model_validate(request.form.to_dict())
        except ValidationError:
            logger.info(f"auth.login: malformed form from {_get_client_ip()}")
            return redirect(url_for("auth.login"))

        try:
            authenticated = self._authenticate_use_case.execute(dto.username, dto.password)
        except SQLAlchemyError as exc:
            logger.exception(f"auth.login: err (username={dto.username})")
            raise InfrastructureError(code="login_failed") from exc

        if not authenticated:
            logger.info(f"auth.login: failed (username={dto.username}, ip={_get_client_ip()})")
            return redirect(url_for("auth.login"))

        self._sessions.set_authenticated(True)
        logger.info(f"auth.login: ok (username={dto.username})")
        return redirect(url_for("posts.index"))

    def logout(self) -> Response:
        if request.method == "GET":
            return render(
                LogoutView(page_title="Log out", authenticated=self._sessions.is_authenticated())
            )

        self._sessions.set_authenticated(False)
        logger.info("auth.logout: ok")
        return redirect(url_for("posts.index"))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["GET", "POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET", "POST"])
        return bp

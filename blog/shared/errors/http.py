# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from blog.interfaces.http.views import ErrorView, render
from blog.shared.logging import logger

from .base import AppError

_MESSAGES = {
    HTTPStatus.BAD_REQUEST: "The request could not be understood.",
    HTTPStatus.NOT_FOUND: "The page you are looking for does not exist.",
    HTTPStatus.METHOD_NOT_ALLOWED: "This method is not allowed here.",
    HTTPStatus.CONFLICT: "The request conflicts with existing data.",
    HTTPStatus.UNPROCESSABLE_ENTITY: "The submitted data is invalid.",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Something went wrong on our side.",
}


def _error_view(status: HTTPStatus, code: str, authenticated: bool) -> ErrorView:
    return ErrorView(
        page_title=f"{status.value} {status.phrase}",
        authenticated=authenticated,
        status=status.value,
        code=code,
        message=_MESSAGES.get(status, status.description),
    )


def handle_app_error(error: AppError, *, authenticated: bool = False) -> Response:
    return render(_error_view(error.status, error.code, authenticated), status=error.status)


def register_error_handler(
    app: Flask,
    *,
    is_authenticated: Callable[[], bool] = lambda: False,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(
            f"Handled application error {exc.code} ({exc.status.value}) "
            f"on {request.method} {request.path}"
        )
        return handle_app_error(exc, authenticated=is_authenticated())

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if exc.code is None or exc.code < 400:
            return exc
        status = HTTPStatus(exc.code)
        code = status.phrase.lower().replace(" ", "_")
        response = render(_error_view(status, code, is_authenticated()), status=status)
        if status == HTTPStatus.METHOD_NOT_ALLOWED and getattr(exc, "valid_methods", None):
            response.headers["Allow"] = ", ".join(exc.valid_methods)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = request.headers.get("X-Forwarded-For", "").split(",")[0].strip() if request.headers.get("X-Forwarded-For") else (request.remote_addr or "unknown")

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, query={dict(request.args)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return render(
            _error_view(default_status, "internal_error", is_authenticated()),
            status=default_status,
        )

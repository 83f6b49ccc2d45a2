# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Typed view models and the renderer that turns them into HTML responses.

Each page has its own frozen dataclass naming the template it fills. Templates
receive the instance as ``view`` and extend ``layout.html``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import ClassVar

from flask import Flask, Response, make_response, render_template

from blog.domain.posts.entities import Post

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: int) -> str:
    return datetime.fromtimestamp(value).strftime(DATE_FORMAT)


@dataclass(frozen=True, slots=True, kw_only=True)
class View:
    template: ClassVar[str]

    page_title: str
    authenticated: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class IndexView(View):
    template: ClassVar[str] = "index.html"

    posts: Sequence[Post] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class PostView(View):
    template: ClassVar[str] = "post.html"

    post: Post


@dataclass(frozen=True, slots=True, kw_only=True)
class PostFormView(View):
    """Shared by the create and edit pages; ``post_id`` is set only when editing."""

    template: ClassVar[str] = "post_form.html"

    action: str
    post_id: int | None = None
    title: str = ""
    body: str = ""
    author: str = ""
    message: str = ""
    invalid_fields: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginView(View):
    template: ClassVar[str] = "login.html"

    message: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class LogoutView(View):
    template: ClassVar[str] = "logout.html"


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorView(View):
    template: ClassVar[str] = "error.html"

    status: int
    code: str
    message: str


def render(view: View, status: int = HTTPStatus.OK) -> Response:
    return make_response(render_template(view.template, view=view), int(status))


def register_template_helpers(app: Flask) -> None:
    app.add_template_filter(format_timestamp, name="date")


__all__ = [
    "DATE_FORMAT",
    "ErrorView",
    "IndexView",
    "LoginView",
    "LogoutView",
    "PostFormView",
    "PostView",
    "View",
    "format_timestamp",
    "register_template_helpers",
    "render",
]

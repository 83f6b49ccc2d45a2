# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, Response, redirect, request, url_for
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from blog.application.use_cases.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.infrastructure.session_store import SessionStore, login_required
from blog.interfaces.http.dto.posts import PostFormDTO
from blog.interfaces.http.views import IndexView, PostFormView, PostView, render
from blog.shared.errors import BadPostIdError, InfrastructureError
from blog.shared.errors.validation import format_pydantic_errors
from blog.shared.logging import logger


def parse_post_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise BadPostIdError(raw)
    return int(raw)


def _form_message(fields: list[str]) -> str:
    return "Please fill in every field: " + ", ".join(fields)


class PostsController:
    def __init__(
        self,
        *,
        list_posts: ListPostsUseCase,
        get_post: GetPostUseCase,
        create_post: CreatePostUseCase,
        update_post: UpdatePostUseCase,
        delete_post: DeletePostUseCase,
        sessions: SessionStore,
    ) -> None:
        self._list_posts = list_posts
        self._get_post = get_post
        self._create_post = create_post
        self._update_post = update_post
        self._delete_post = delete_post
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        guarded = login_required(self._sessions)
        bp = Blueprint("posts", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/post/new", view_func=guarded(self.create), methods=["GET", "POST"])
        bp.add_url_rule("/post/<post_id>", view_func=self.show, methods=["GET"])
        bp.add_url_rule(
            "/post/edit/<post_id>",
            view_func=guarded(self.edit),
            methods=["GET", "POST"],
        )
        bp.add_url_rule(
            "/post/delete/<post_id>",
            view_func=guarded(self.delete),
            methods=["GET", "POST"],
        )
        return bp

    def index(self) -> Response:
        try:
            posts = self._list_posts.execute()
        except SQLAlchemyError as exc:
            logger.exception("posts.list: err")
            raise InfrastructureError(code="posts_list_failed") from exc
        logger.debug(f"posts.list: ok (n={len(posts)})")
        return render(
            IndexView(
                page_title="Posts",
                authenticated=self._sessions.is_authenticated(),
                posts=posts,
            )
        )

    def show(self, post_id: str) -> Response:
        pid = parse_post_id(post_id)
        try:
            post = self._get_post.execute(pid)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.show: err (post_id={pid})")
            raise InfrastructureError(code="post_fetch_failed") from exc
        return render(
            PostView(
                page_title=post.title,
                authenticated=self._sessions.is_authenticated(),
                post=post,
            )
        )

    def create(self) -> Response:
        if request.method == "GET":
            return render(self._form_view("New post", url_for("posts.create")))

        t0 = perf_counter()
        try:
            dto = PostFormDTO.model_validate(request.form.to_dict())
        except ValidationError as exc:
            fields = format_pydantic_errors(exc)["fields"]
            logger.info(f"posts.create: invalid form (fields={fields})")
            return render(
                self._form_view(
                    "New post",
                    url_for("posts.create"),
                    message=_form_message(fields),
                    invalid_fields=frozenset(fields),
                ),
                status=HTTPStatus.UNPROCESSABLE_ENTITY,
            )

        try:
            post = self._create_post.execute(dto.title, dto.body, dto.author)
        except SQLAlchemyError as exc:
            logger.exception("posts.create: err")
            raise InfrastructureError(code="post_create_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.create: ok (post_id={post.id}, dt_ms={dt:.0f})")
        return redirect(url_for("posts.show", post_id=post.id))

    def edit(self, post_id: str) -> Response:
        pid = parse_post_id(post_id)
        action = url_for("posts.edit", post_id=pid)

        try:
            post = self._get_post.execute(pid)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.edit: err (post_id={pid})")
            raise InfrastructureError(code="post_fetch_failed") from exc

        if request.method == "GET":
            return render(
                self._form_view(
                    "Edit post",
                    action,
                    post_id=post.id,
                    title=post.title,
                    body=post.body,
                    author=post.author,
                )
            )

        t0 = perf_counter()
        try:
            dto = PostFormDTO.model_validate(request.form.to_dict())
        except ValidationError as exc:
            fields = format_pydantic_errors(exc)["fields"]
            logger.info(f"posts.edit: invalid form (post_id={pid}, fields={fields})")
            return render(
                self._form_view(
                    "Edit post",
                    action,
                    post_id=pid,
                    message=_form_message(fields),
                    invalid_fields=frozenset(fields),
                ),
                status=HTTPStatus.UNPROCESSABLE_ENTITY,
            )

        try:
            self._update_post.execute(pid, dto.title, dto.body, dto.author)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.edit: err (post_id={pid})")
            raise InfrastructureError(code="post_update_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.edit: ok (post_id={pid}, dt_ms={dt:.0f})")
        return redirect(url_for("posts.show", post_id=pid))

    def delete(self, post_id: str) -> Response:
        pid = parse_post_id(post_id)
        try:
            self._delete_post.execute(pid)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.delete: err (post_id={pid})")
            raise InfrastructureError(code="post_delete_failed") from exc
        logger.info(f"posts.delete: ok (post_id={pid})")
        return redirect(url_for("posts.index"))

    def _form_view(self, page_title: str, action: str, **values) -> PostFormView:
        if "message" in values:
            # Re-render with what the user submitted.
            for name in ("title", "body", "author"):
                values.setdefault(name, request.form.get(name, ""))
        return PostFormView(
            page_title=page_title,
            authenticated=self._sessions.is_authenticated(),
            action=action,
            **values,
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from blog.domain.posts.entities import Post, PostDraft
from blog.domain.posts.repositories import PostRepository
from blog.shared.errors.base import ValidationError


def build_draft(title: str, body: str, author: str, created_at: int) -> PostDraft:
    missing = [
        name for name, value in (("title", title), ("body", body), ("author", author)) if not value
    ]
    if missing:
        raise ValidationError(context={"fields": missing})
    return PostDraft(title=title, body=body, author=author, created_at=created_at)


class CreatePostUseCase:
    def __init__(
        self,
        *,
        posts: PostRepository,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, title: str, body: str, author: str) -> Post:
        draft = build_draft(title, body, author, int(self._clock()))
        return self._posts.add(draft)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Post, PostDraft


class PostRepository(Protocol):
    def add(self, draft: PostDraft) -> Post: ...
    def get(self, post_id: int) -> Post | None: ...
    def list(self) -> list[Post]: ...
    def update(self, post_id: int, draft: PostDraft) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Post, PostDraft
from .repositories import PostRepository

__all__ = ["Post", "PostDraft", "PostRepository"]

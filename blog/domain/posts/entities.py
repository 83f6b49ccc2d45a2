# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PostDraft:
    """Field values for a post that has not been stored (or is being overwritten)."""

    title: str
    body: str
    author: str
    created_at: int


@dataclass(slots=True, frozen=True)
class Post:

    id: int
    title: str
    body: str
    author: str
    created_at: int

from __future__ import annotations

from pydantic import BaseModel, Field


class PostFormDTO(BaseModel):
    """Create/edit form submission. Every field must be non-empty."""

    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    author: str = Field(min_length=1)

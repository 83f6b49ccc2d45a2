from __future__ import annotations

import re
from datetime import datetime

import pytest

from blog.interfaces.http.controllers import parse_post_id
from blog.interfaces.http.views import DATE_FORMAT, IndexView, PostFormView, format_timestamp
from blog.shared.errors import BadPostIdError
from blog.shared.logging import sanitize_message


def test_format_timestamp() -> None:
    formatted = format_timestamp(0)

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", formatted)
    assert formatted == datetime.fromtimestamp(0).strftime(DATE_FORMAT)


def test_view_models_name_their_templates() -> None:
    assert IndexView(page_title="Posts").template == "index.html"
    form = PostFormView(page_title="New post", action="/post/new")
    assert form.template == "post_form.html"
    assert form.post_id is None
    assert form.invalid_fields == frozenset()


@pytest.mark.parametrize("raw", ["1", "42", "007"])
def test_parse_post_id_accepts_digits(raw: str) -> None:
    assert parse_post_id(raw) == int(raw)


@pytest.mark.parametrize("raw", ["", "abc", "-1", "1.5", "1e3", "١"])
def test_parse_post_id_rejects_non_numeric(raw: str) -> None:
    with pytest.raises(BadPostIdError) as excinfo:
        parse_post_id(raw)
    assert excinfo.value.status == 400


def test_sanitize_message_redacts_secrets() -> None:
    message = sanitize_message("login password=hunter2 session_key=abc Cookie: session=eyJhbGciOi.xyz")

    assert "hunter2" not in message
    assert "abc" not in message
    assert "eyJhbGciOi" not in message
    assert "***REDACTED***" in message

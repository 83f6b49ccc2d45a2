from __future__ import annotations

from flask.testing import FlaskClient
from loguru import logger
from sqlalchemy import text

from blog.container import Container


def _create(client: FlaskClient, title: str = "A", body: str = "B", author: str = "C"):
    return client.post("/post/new", data={"title": title, "body": body, "author": author})


def test_index_lists_posts(logged_in: FlaskClient) -> None:
    _create(logged_in, title="Hello world")

    response = logged_in.get("/")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert b"Hello world" in response.data


def test_empty_index(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert b"No posts yet." in response.data
    assert b'href="/login"' in response.data


def test_create_edit_delete_scenario(logged_in: FlaskClient) -> None:
    created = _create(logged_in, "A", "B", "C")
    assert created.status_code == 302
    assert created.headers["Location"].endswith("/post/1")

    shown = logged_in.get("/post/1")
    assert shown.status_code == 200
    assert b"<h1>A</h1>" in shown.data
    assert b'<div class="body">B</div>' in shown.data
    assert b'<span class="author">C</span>' in shown.data

    edited = logged_in.post(
        "/post/edit/1", data={"title": "A2", "body": "B2", "author": "C2"}
    )
    assert edited.status_code == 302
    assert edited.headers["Location"].endswith("/post/1")

    shown = logged_in.get("/post/1")
    assert b"<h1>A2</h1>" in shown.data
    assert b'<div class="body">B2</div>' in shown.data
    assert b'<span class="author">C2</span>' in shown.data
    assert b"<h1>A</h1>" not in shown.data

    deleted = logged_in.post("/post/delete/1")
    assert deleted.status_code == 302
    assert deleted.headers["Location"].endswith("/")

    assert logged_in.get("/post/1").status_code == 404


def test_edit_updates_timestamp(logged_in: FlaskClient, container: Container) -> None:
    _create(logged_in)
    container.update_post_use_case._clock = lambda: 2_000_000_000.0

    logged_in.post("/post/edit/1", data={"title": "A2", "body": "B2", "author": "C2"})

    post = container.post_repository.get(1)
    assert post is not None
    assert post.created_at == 2_000_000_000


def test_create_with_empty_field_rerenders_form(
    logged_in: FlaskClient, container: Container
) -> None:
    response = _create(logged_in, title="A", body="", author="C")

    assert response.status_code == 422
    assert b"Please fill in every field: body" in response.data
    assert b'value="A"' in response.data
    assert container.post_repository.list() == []


def test_edit_with_empty_field_keeps_post(logged_in: FlaskClient, container: Container) -> None:
    _create(logged_in)

    response = logged_in.post("/post/edit/1", data={"title": "", "body": "B2", "author": "C2"})

    assert response.status_code == 422
    assert b"Please fill in every field: title" in response.data
    post = container.post_repository.get(1)
    assert post is not None and post.title == "A"


def test_edit_form_is_prefilled(logged_in: FlaskClient) -> None:
    _create(logged_in, "Title here", "Body here", "Author here")

    response = logged_in.get("/post/edit/1")

    assert response.status_code == 200
    assert b'value="Title here"' in response.data
    assert b"Body here</textarea>" in response.data
    assert b'value="Author here"' in response.data


def test_delete_via_get(logged_in: FlaskClient) -> None:
    _create(logged_in)

    response = logged_in.get("/post/delete/1")

    assert response.status_code == 302
    assert logged_in.get("/post/1").status_code == 404


def test_malformed_id_is_bad_request(client: FlaskClient) -> None:
    response = client.get("/post/abc")

    assert response.status_code == 400
    assert b'data-code="bad_post_id"' in response.data


def test_missing_post_is_not_found(logged_in: FlaskClient) -> None:
    assert logged_in.get("/post/999").status_code == 404
    assert logged_in.get("/post/edit/999").status_code == 404
    assert logged_in.post("/post/delete/999").status_code == 404
    assert logged_in.get("/post/edit/x1").status_code == 400


def test_storage_failure_is_internal_error(client: FlaskClient, container: Container) -> None:
    with container.database.session_scope() as session:
        session.execute(text("DROP TABLE posts"))

    response = client.get("/")

    assert response.status_code == 500
    assert b'data-code="posts_list_failed"' in response.data


def test_unknown_route_and_wrong_method(client: FlaskClient) -> None:
    assert client.get("/nowhere").status_code == 404
    response = client.post("/post/1")
    assert response.status_code == 405
    assert "GET" in response.headers["Allow"]


def test_static_css_is_served(client: FlaskClient) -> None:
    response = client.get("/css/style.css")

    assert response.status_code == 200
    assert response.mimetype == "text/css"
    response.close()


def test_html_is_escaped(logged_in: FlaskClient) -> None:
    _create(logged_in, title="<script>x</script>")

    response = logged_in.get("/post/1")

    assert b"<script>x</script>" not in response.data
    assert b"&lt;script&gt;" in response.data


def test_storage_failure_logs_one_traceback(client: FlaskClient, container: Container) -> None:
    with container.database.session_scope() as session:
        session.execute(text("DROP TABLE posts"))

    tracebacks = []
    sink_id = logger.add(
        lambda message: tracebacks.append(message.record["message"])
        if message.record["exception"] is not None
        else None,
        level="DEBUG",
    )
    try:
        assert client.get("/").status_code == 500
    finally:
        logger.remove(sink_id)

    assert tracebacks == ["posts.list: err"]


def test_long_title_and_author_are_accepted(logged_in: FlaskClient, container: Container) -> None:
    title, author = "T" * 300, "A" * 1000

    response = _create(logged_in, title=title, author=author)

    assert response.status_code == 302
    (post,) = container.post_repository.list()
    assert post.title == title
    assert post.author == author


def test_invalid_edit_of_missing_post_is_not_found(logged_in: FlaskClient) -> None:
    response = logged_in.post("/post/edit/999", data={"title": "", "body": "B", "author": "C"})

    assert response.status_code == 404
    assert b'data-code="post_not_found"' in response.data

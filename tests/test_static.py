import asyncio

from fastapi.testclient import TestClient

from webapp.config import Config
from webapp.main import create_app


def test_existing_file(tmp_path):
    (tmp_path / "app.js").write_bytes(b"console.log('hi');\n")
    client = TestClient(create_app(Config(static_dir=str(tmp_path))))
    response = client.get("/static/app.js")
    assert response.status_code == 200
    assert response.content == b"console.log('hi');\n"


def test_nested_file(tmp_path):
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "logo.svg").write_bytes(b"<svg/>")
    client = TestClient(create_app(Config(static_dir=str(tmp_path))))
    response = client.get("/static/img/logo.svg")
    assert response.status_code == 200
    assert response.content == b"<svg/>"


def test_missing_file(tmp_path):
    client = TestClient(create_app(Config(static_dir=str(tmp_path))))
    assert client.get("/static/missing.css").status_code == 404


def test_missing_directory(tmp_path):
    client = TestClient(create_app(Config(static_dir=str(tmp_path / "nope"))))
    assert client.get("/static/style.css").status_code == 404


def asgi_get(app, path):
    """Send a GET for ``path`` exactly as given, without client-side normalization."""
    messages = []
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("ascii"),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver")],
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
    }

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        messages.append(message)

    asyncio.run(app(scope, receive, send))
    status = messages[0]["status"]
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    return status, body


def test_no_escape_from_static_dir(tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (tmp_path / "secret.txt").write_text("secret")
    app = create_app(Config(static_dir=str(static)))
    status, body = asgi_get(app, "/static/../secret.txt")
    assert status == 404
    assert b"secret" not in body

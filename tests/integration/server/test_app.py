"""Integration tests for the Flask viewer app"""

import pytest

from docview.server.app import create_app


@pytest.fixture(name="client")
def client_fixture(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Doc Viewer" in resp.data


def test_list_root(client, doc_root):
    resp = client.get("/api/list")
    assert resp.status_code == 200
    assert resp.headers["Cache-Control"] == "no-cache"
    body = resp.get_json()
    assert body["path"] == doc_root.resolve().as_posix()
    assert body["parent"] is None
    assert body["items"][0]["name"] == "sub"


def test_list_outside_root_is_forbidden(client):
    resp = client.get("/api/list", query_string={"path": ".."})
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Access denied"}


def test_read_file(client):
    body = client.get("/api/read", query_string={"path": "README.md"}).get_json()
    assert body["content"].startswith("# Hello")
    assert body["ext"] == "md"
    assert "html" not in body


def test_read_without_path_is_bad_request(client):
    resp = client.get("/api/read")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Path required"}


def test_render_markdown(client):
    body = client.get("/api/render", query_string={"path": "README.md"}).get_json()
    assert body["html"] == (
        '<div class="md-rendered"><h1>Hello</h1><p>World with <strong>bold</strong>.</p></div>'
    )


def test_render_markdown_source_view(client):
    body = client.get("/api/render", query_string={"path": "README.md", "view": "source"}).get_json()
    assert body["html"].startswith('<div class="raw-view">')
    assert "<h1>" not in body["html"]


def test_render_code_file(client):
    body = client.get("/api/render", query_string={"path": "sub/app.py"}).get_json()
    assert '<span class="tok-kw">def</span>' in body["html"]


def test_render_binary_has_no_html(client):
    body = client.get("/api/render", query_string={"path": "image.png"}).get_json()
    assert body["html"] is None
    assert body["content"] is None
    assert "Binary" in body["error"]


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}

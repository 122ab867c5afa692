"""
Tests for the Flask API surface.
"""

import pytest

from helpers import VALID_DOCUMENT, wrap_body
from minihtml.core.engine import reset_engine
from web.server import create_app


@pytest.fixture
def client():
    reset_engine()
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
    reset_engine()


def _validate(client, text, version=1, uri="file:///doc.mhtml"):
    return client.post("/api/validate", json={"uri": uri, "version": version, "text": text})


def test_validate_valid(client):
    response = _validate(client, VALID_DOCUMENT)
    assert response.status_code == 200
    data = response.get_json()
    assert data["uri"] == "file:///doc.mhtml"
    assert data["version"] == 1
    assert data["diagnostics"] == []
    assert data["status"] == "ok"
    assert data["stale"] is False
    assert data["metadata"]["input_length"] == len(VALID_DOCUMENT)


def test_validate_invalid(client):
    data = _validate(client, wrap_body("<p>hi</p>")).get_json()
    assert data["status"] == "invalid"
    assert len(data["diagnostics"]) == 1
    diag = data["diagnostics"][0]
    assert diag["range"]["start"] == {"line": 0, "character": 41}
    assert diag["code"] == "body_content"


@pytest.mark.parametrize("payload", [
    {},
    {"uri": "", "text": "<html></html>"},
    {"uri": "file:///a.mhtml"},
    {"uri": "file:///a.mhtml", "text": "<html></html>", "version": "2"},
    {"uri": "file:///a.mhtml", "text": "<html></html>", "version": True},
])
def test_validate_bad_input(client, payload):
    response = client.post("/api/validate", json=payload)
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_stale_result_is_not_published(client):
    _validate(client, "<p>", version=2)
    data = _validate(client, VALID_DOCUMENT, version=1).get_json()
    assert data["stale"] is True

    latest = client.get("/api/diagnostics", query_string={"uri": "file:///doc.mhtml"}).get_json()
    assert latest["version"] == 2
    assert len(latest["diagnostics"]) == 2


def test_newer_result_replaces(client):
    _validate(client, "<p>", version=1)
    _validate(client, VALID_DOCUMENT, version=2)
    latest = client.get("/api/diagnostics?uri=file:///doc.mhtml").get_json()
    assert latest == {"uri": "file:///doc.mhtml", "version": 2, "diagnostics": []}


def test_diagnostics_requires_uri(client):
    assert client.get("/api/diagnostics").status_code == 400


def test_diagnostics_unknown_document(client):
    assert client.get("/api/diagnostics?uri=file:///unknown.mhtml").status_code == 404


def test_completions(client):
    data = client.get("/api/completions").get_json()
    assert data["triggerCharacters"] == ["<", "/"]
    assert len(data["items"]) == 7
    assert data["items"][0]["insertTextFormat"] == 2

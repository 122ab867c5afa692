"""
Tests for JSON export of validation results.
"""

import json

from helpers import wrap_body
from minihtml.core.context import ValidationRequest
from minihtml.ir.serialization import load, save, to_publish_json


def test_save_and_load(engine, tmp_path):
    result = engine.validate_document(
        ValidationRequest(uri="file:///doc.mhtml", version=4, text=wrap_body("<p>x</p>"))
    )
    path = tmp_path / "result.json"
    save(result, path)

    loaded = load(path)
    assert loaded.request_id == result.request_id
    assert loaded.diagnostics == result.diagnostics
    assert [t.pass_name for t in loaded.trace] == [t.pass_name for t in result.trace]


def test_publish_json(engine):
    result = engine.validate_document(
        ValidationRequest(uri="untitled:1", version=9, text="<p>")
    )
    envelope = json.loads(to_publish_json(result))
    assert envelope["uri"] == "untitled:1"
    assert envelope["version"] == 9
    assert envelope["diagnostics"][0]["range"]["end"] == {"line": 0, "character": 6}

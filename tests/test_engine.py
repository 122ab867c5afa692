"""
Tests for the pipeline engine and the public validate() entry point.
"""

import pytest

import minihtml
from helpers import VALID_DOCUMENT, codes, wrap_body, wrap_head
from minihtml.core.context import ValidationContext, ValidationRequest
from minihtml.core.engine import Engine, Pipeline, reset_engine
from minihtml.ir.enums import ValidationStatus
from minihtml.passes import check_root_bounds, emit


def _request(text, version=1, uri="file:///doc.mhtml"):
    return ValidationRequest(uri=uri, version=version, text=text)


def test_request_generates_id():
    """ValidationRequest should auto-generate an ID if not provided."""
    request = _request("<html></html>")
    assert request.request_id
    assert request.request_id != _request("<html></html>").request_id


def test_context_from_request(rules):
    """ValidationContext should be created from request."""
    request = _request("<html>\n</html>")
    ctx = ValidationContext.from_request(request, rules)
    assert ctx.text == "<html>\n</html>"
    assert ctx.lines.line_count == 2
    assert ctx.diagnostics == []
    assert ctx.status == ValidationStatus.OK


def test_valid_document(engine):
    """A valid document should yield status ok and no diagnostics."""
    result = engine.validate_document(_request(VALID_DOCUMENT))
    assert result.status == ValidationStatus.OK
    assert result.diagnostics == []
    assert result.uri == "file:///doc.mhtml"
    assert result.version == 1


def test_byte_order_mark(engine):
    """A document starting with a byte order mark should validate cleanly."""
    result = engine.validate_document(_request("\ufeff" + VALID_DOCUMENT))
    assert result.diagnostics == []


def test_result_carries_uri_and_version(engine):
    """Results should be tagged with the request's uri and version."""
    result = engine.validate_document(_request("<p>", version=42, uri="untitled:1"))
    assert result.status == ValidationStatus.INVALID
    assert (result.uri, result.version) == ("untitled:1", 42)


def test_rule_check_order(engine):
    """Diagnostics should follow rule order, then document order."""
    text = (
        "<html><head><title><b>x</b></title><p></p></head>"
        "<body><i>y</i><span><div></div></span></body></html>"
    )
    result = engine.validate_document(_request(text))
    assert codes(result.diagnostics) == [
        "head_content",
        "head_content",
        "body_content",
        "title_text_only",
        "span_no_div",
    ]


def test_both_bounds_and_structure(engine):
    """Root bounds and structure checks should both report."""
    result = engine.validate_document(_request("  <html><body></body></html> trailing"))
    assert codes(result.diagnostics) == ["root_end", "head_count"]


def test_missing_html_fails_open(engine):
    """Without an html pair only the root bounds checks should fire."""
    result = engine.validate_document(_request("<body><p>x</p></body>"))
    assert codes(result.diagnostics) == ["root_start", "root_end"]


def test_title_rule_reported_once(engine):
    """Markup in a title should produce exactly one title diagnostic."""
    result = engine.validate_document(_request(wrap_head("<title><b>bold</b></title>")))
    assert codes(result.diagnostics).count("title_text_only") == 1


def test_span_rule_reported_once(engine):
    """A div in a span should produce exactly one diagnostic."""
    result = engine.validate_document(_request(wrap_body("<span><div>x</div></span>")))
    assert codes(result.diagnostics) == ["span_no_div"]


def test_deep_valid_nesting(engine):
    """Hundreds of nested levels should validate with no diagnostics."""
    content = "<div>" * 400 + "<span>" * 100 + "x" + "</span>" * 100 + "</div>" * 400
    result = engine.validate_document(_request(wrap_body(content)))
    assert result.diagnostics == []


def test_idempotent_and_deterministic(engine):
    """Repeated runs over the same text should give identical diagnostics."""
    text = wrap_body("<p>a</p><span><div></div></span><p>b</p>")
    first = engine.validate_document(_request(text))
    second = engine.validate_document(_request(text))
    assert [d.to_wire() for d in first.diagnostics] == [d.to_wire() for d in second.diagnostics]


def test_garbage_input_is_handled(engine):
    """Malformed input should never make a pass fail."""
    for text in ("", "<", ">>><<<", "</html><html>", "<<html>>", "\x00�</ />"):
        result = engine.validate_document(_request(text))
        assert result.status != ValidationStatus.ERROR


def test_publish_called_with_empty_result(engine):
    """Empty results should still be published."""
    published = []
    engine.validate_document(_request(VALID_DOCUMENT), publish=published.append)
    assert len(published) == 1
    assert published[0].diagnostics == []


def test_pass_failure_is_contained(rules):
    """A failing pass should give status error, no diagnostics, and still publish."""
    def explode(ctx):
        raise RuntimeError("boom")

    published = []
    engine = Engine(rules=rules)
    engine.register_pipeline(Pipeline(id="default", name="Broken", passes=[check_root_bounds, explode, emit]))

    result = engine.validate_document(_request("not html"), publish=published.append)
    assert result.status == ValidationStatus.ERROR
    assert result.diagnostics == []
    assert published == [result]
    assert result.trace[-1].action == "error"


def test_pipeline_not_found(rules):
    """Engine should raise for an unregistered pipeline."""
    engine = Engine(rules=rules)
    with pytest.raises(KeyError):
        engine.validate_document(_request("<html></html>"), "nonexistent")


def test_list_pipelines(engine):
    """The default pipeline should be registered."""
    assert engine.list_pipelines() == ["default"]


def test_trace_records_every_pass(engine):
    """Every pass should leave a trace entry, in pipeline order."""
    result = engine.validate_document(_request(VALID_DOCUMENT))
    assert [t.pass_name for t in result.trace] == [
        "p00_root_bounds",
        "p10_parse",
        "p20_structure",
        "p30_head_content",
        "p32_body_content",
        "p40_nesting",
        "p90_emit",
    ]


class TestValidateFunction:
    """Tests for minihtml.validate."""

    def setup_method(self):
        reset_engine()

    def teardown_method(self):
        reset_engine()

    def test_valid(self):
        """Verify a valid document gives an empty list."""
        assert minihtml.validate("file:///a.mhtml", 1, VALID_DOCUMENT) == []

    def test_body_paragraph(self):
        """Verify <p>hi</p> in body gives one diagnostic at <p>."""
        diagnostics = minihtml.validate("file:///a.mhtml", 3, wrap_body("<p>hi</p>"))
        assert codes(diagnostics) == ["body_content"]
        start = diagnostics[0].range.start
        assert (start.line, start.character) == (0, 41)

    def test_spaced_self_closing_slash(self):
        """Verify <p / > in body is reported like an opening tag."""
        diagnostics = minihtml.validate("file:///a.mhtml", 1, wrap_body("<p / >"))
        assert codes(diagnostics) == ["body_content"]

    def test_two_heads(self):
        """Verify two heads give exactly one head diagnostic."""
        text = (
            "<html><head><title>a</title></head><head><title>b</title></head>"
            "<body><div>x</div></body></html>"
        )
        assert codes(minihtml.validate("file:///a.mhtml", 1, text)) == ["head_count"]

    def test_wire_shape(self):
        """Verify the editor-protocol shape of a diagnostic."""
        diagnostics = minihtml.validate("file:///a.mhtml", 1, "<html>")
        assert diagnostics[0].to_wire() == {
            "severity": 1,
            "range": {
                "start": {"line": 0, "character": 0},
                "end": {"line": 0, "character": 6},
            },
            "message": "Document must end with </html>",
            "code": "root_end",
            "source": "minihtml",
        }

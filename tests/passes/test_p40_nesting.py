"""
Unit tests for the nesting validator (p40).
"""

from helpers import codes, run, wrap_body, wrap_head
from minihtml.passes import match_structure, parse, validate_body_content, validate_nesting


def _nesting(ctx):
    return run(ctx, parse, match_structure, validate_nesting)


def _span(diag):
    return (diag.range.start.character, diag.range.end.character)


class TestSpanRule:
    """span cannot contain div."""

    def test_direct_div(self, make_ctx):
        """Verify a div directly inside a span is reported at the span."""
        ctx = _nesting(make_ctx(wrap_body("<span><div>x</div></span>")))
        assert codes(ctx.diagnostics) == ["span_no_div"]
        diag = ctx.diagnostics[0]
        assert diag.message == "<span> cannot contain <div> elements"
        assert _span(diag) == (41, 66)

    def test_div_at_any_depth(self, make_ctx):
        """Verify every enclosing span is reported, outermost first."""
        ctx = _nesting(make_ctx(wrap_body("<span><span><div>x</div></span></span>")))
        assert codes(ctx.diagnostics) == ["span_no_div", "span_no_div"]
        assert [_span(d) for d in ctx.diagnostics] == [(41, 79), (47, 72)]

    def test_span_inside_div(self, make_ctx):
        """Verify spans nested in divs are checked."""
        ctx = _nesting(make_ctx(wrap_body("<div><span><div></div></span></div>")))
        assert [_span(d) for d in ctx.diagnostics] == [(46, 70)]

    def test_self_closing_div(self, make_ctx):
        """Verify a self-closing div inside a span still counts."""
        ctx = _nesting(make_ctx(wrap_body("<span><div/></span>")))
        assert codes(ctx.diagnostics) == ["span_no_div"]

    def test_stray_closing_div_is_ignored(self, make_ctx):
        """Verify a lone closing div inside a span does not count."""
        ctx = _nesting(make_ctx(wrap_body("<span>x</div></span>")))
        assert ctx.diagnostics == []

    def test_unclosed_span_is_not_checked(self, make_ctx):
        """Verify only span pairs are checked."""
        ctx = _nesting(make_ctx(wrap_body("<div><span><div>x</div></div>")))
        assert ctx.diagnostics == []

    def test_valid_nesting(self, make_ctx):
        """Verify valid div/span nesting passes."""
        ctx = _nesting(make_ctx(wrap_body("<div><div><span><span>x</span></span></div></div>")))
        assert ctx.diagnostics == []


class TestTitleRule:
    """title can contain only text."""

    def test_markup_in_title(self, make_ctx):
        """Verify markup in the head's title is reported at the title."""
        ctx = _nesting(make_ctx(wrap_head("<title><b>bold</b></title>")))
        assert codes(ctx.diagnostics) == ["title_text_only"]
        diag = ctx.diagnostics[0]
        assert diag.message == "<title> can contain only text"
        assert _span(diag) == (12, 38)

    def test_bare_less_than_in_title(self, make_ctx):
        """Verify any '<' in the title text is reported."""
        ctx = _nesting(make_ctx(wrap_head("<title>a < b</title>")))
        assert codes(ctx.diagnostics) == ["title_text_only"]

    def test_plain_title(self, make_ctx):
        """Verify plain text titles pass."""
        ctx = _nesting(make_ctx(wrap_head("<title>Just text &amp; more</title>")))
        assert ctx.diagnostics == []

    def test_title_inside_body(self, make_ctx):
        """Verify titles nested in the body are checked."""
        ctx = _nesting(make_ctx(wrap_body("<div><title>a<i>b</i></title></div>")))
        assert codes(ctx.diagnostics) == ["title_text_only"]


class TestDeepNesting:
    """Nesting depth has no limit."""

    def test_hundreds_of_levels(self, make_ctx):
        """Verify deep valid nesting produces no diagnostics."""
        content = "<div>" * 300 + "<span>" * 50 + "x" + "</span>" * 50 + "</div>" * 300
        ctx = _nesting(make_ctx(wrap_body(content)))
        assert ctx.diagnostics == []

    def test_deep_title_is_checked(self, make_ctx):
        """Verify a title thousands of levels deep is still checked."""
        content = "<div>" * 3000 + "<title><b>x</b></title>" + "</div>" * 3000
        ctx = run(make_ctx(wrap_body(content)), parse, match_structure, validate_body_content, validate_nesting)
        assert codes(ctx.diagnostics) == ["body_content", "body_content", "title_text_only"]
        assert ctx.diagnostics[-1].range.start.character == 41 + 5 * 3000

    def test_deep_span_is_checked(self, make_ctx):
        """Verify a span below thousands of divs is still checked."""
        content = "<div>" * 2000 + "<span><div>x</div></span>" + "</div>" * 2000
        ctx = _nesting(make_ctx(wrap_body(content)))
        assert codes(ctx.diagnostics) == ["span_no_div"]

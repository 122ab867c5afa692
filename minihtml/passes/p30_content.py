"""
Pass 30 — Content Validators

Two sibling checks over the inner text of the matched sections:
- head may contain only title or meta
- body may contain only div or span

Every tag token inside the section counts, whatever its depth. Self-closing
tokens (``<br/>``) are never flagged here, even for disallowed names. A
closing tag is flagged only when it closes nothing, so a disallowed pair is
reported once, at its opening tag.
"""

from typing import Optional

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.ir.enums import DiagnosticCode
from minihtml.markup.tree import ElementNode

HEAD_PASS_NAME = "p30_head_content"
BODY_PASS_NAME = "p32_body_content"
head_log = get_pass_logger(HEAD_PASS_NAME)
body_log = get_pass_logger(BODY_PASS_NAME)


def _check_section(
    ctx: ValidationContext,
    section: Optional[ElementNode],
    code: DiagnosticCode,
) -> int:
    if section is None:
        return 0

    rule = ctx.rules.rule_for(section.name)
    flagged = 0
    for token in ctx.tree.tokens_within(section.inner_start, section.inner_end):
        if token.is_self_closing:
            continue
        if token.is_close and ctx.tree.is_matched_close(token):
            continue
        if rule.allows(token.name):
            continue
        ctx.report_span(code, rule.message, token.start, token.end)
        flagged += 1
    return flagged


def validate_head_content(ctx: ValidationContext) -> ValidationContext:
    """Flag tags other than title/meta inside the matched head."""
    flagged = _check_section(ctx, ctx.head, DiagnosticCode.HEAD_CONTENT)
    head_log.verbose("head_content_checked", checked=ctx.head is not None, violations=flagged)
    ctx.add_trace(HEAD_PASS_NAME, "checked_head_content", detail=f"{flagged} violations")
    return ctx


def validate_body_content(ctx: ValidationContext) -> ValidationContext:
    """Flag tags other than div/span inside the matched body."""
    flagged = _check_section(ctx, ctx.body, DiagnosticCode.BODY_CONTENT)
    body_log.verbose("body_content_checked", checked=ctx.body is not None, violations=flagged)
    ctx.add_trace(BODY_PASS_NAME, "checked_body_content", detail=f"{flagged} violations")
    return ctx

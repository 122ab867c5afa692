"""
Pass 20 — Structural Matcher

Locates the top-level ``html`` element and checks that it holds exactly
one ``head`` and exactly one ``body`` element.

A document with no ``html`` pair is left alone here: the later rules need
a root to work from, so only the root-bounds checks can fire for it.
"""

from typing import Optional

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.ir.enums import DiagnosticCode
from minihtml.markup.tree import ElementNode, NodeKind

PASS_NAME = "p20_structure"
log = get_pass_logger(PASS_NAME)


def top_level_roots(nodes: list) -> list[ElementNode]:
    """Closed ``html`` elements that are not nested in another ``html`` pair."""
    roots: list[ElementNode] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if not isinstance(node, ElementNode):
            continue
        if node.kind == NodeKind.HTML and node.closed:
            roots.append(node)
            continue
        stack.extend(reversed(node.children))
    return roots


def _first_named(root: ElementNode, kind: NodeKind) -> Optional[ElementNode]:
    for node in root.iter_descendants():
        if node.kind == kind:
            return node
    return None


def match_structure(ctx: ValidationContext) -> ValidationContext:
    """
    Match html/head/body and enforce their cardinality.

    Only the first top-level ``html`` element is validated further; every
    additional one is reported at its opening tag.
    """
    roots = top_level_roots(ctx.tree.children)
    if not roots:
        log.verbose("no_html_element")
        ctx.add_trace(PASS_NAME, "no_root")
        return ctx

    html = roots[0]
    for extra in roots[1:]:
        ctx.report_span(
            DiagnosticCode.SINGLE_ROOT,
            ctx.rules.message("single_root"),
            extra.open_token.start,
            extra.open_token.end,
        )
    ctx.html = html

    matched = {}
    for kind, code, message_key in (
        (NodeKind.HEAD, DiagnosticCode.HEAD_COUNT, "head_count"),
        (NodeKind.BODY, DiagnosticCode.BODY_COUNT, "body_count"),
    ):
        pairs = [n for n in html.iter_descendants() if n.kind == kind and n.closed]
        log.debug("counted", element=kind.value, pairs=len(pairs))
        if len(pairs) == 1:
            matched[kind] = pairs[0]
            continue
        anchor = _first_named(html, kind) or html
        ctx.report_span(
            code,
            ctx.rules.message(message_key),
            anchor.open_token.start,
            anchor.open_token.end,
        )

    ctx.head = matched.get(NodeKind.HEAD)
    ctx.body = matched.get(NodeKind.BODY)

    log.verbose(
        "structure_matched",
        roots=len(roots),
        head=ctx.head is not None,
        body=ctx.body is not None,
    )
    ctx.add_trace(PASS_NAME, "matched_structure", detail=f"{len(roots)} root(s)")
    return ctx

"""
Pass 40 — Nesting Validator

Walks the matched head and body subtrees:
- title can contain only text
- span cannot contain a div, at any depth
- div may contain div, span or text (nothing to check, but descended into)

Each element is visited once, so a violation is reported once however deep
it sits. The walk keeps an explicit stack of (element, enclosing names)
pairs, so nesting depth is bounded only by the document.
"""

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.ir.enums import DiagnosticCode
from minihtml.markup.tree import ElementNode, NodeKind

PASS_NAME = "p40_nesting"
log = get_pass_logger(PASS_NAME)


class _NestingVisitor:
    def __init__(self, ctx: ValidationContext):
        self.ctx = ctx
        self.tree = ctx.tree
        self.title_rule = ctx.rules.rule_for("title")
        self.span_rule = ctx.rules.rule_for("span")
        self.visited = 0
        self.violations = 0
        self.max_depth = 0

    def visit(self, section: ElementNode) -> None:
        """Preorder walk over every element below ``section``."""
        stack = [(child, (section.name,)) for child in reversed(section.elements())]
        while stack:
            element, ancestors = stack.pop()
            self.visited += 1
            self.max_depth = max(self.max_depth, len(ancestors))
            if element.closed:
                self.check(element)
            inner = ancestors + (element.name,)
            stack.extend((child, inner) for child in reversed(element.elements()))

    def check(self, element: ElementNode) -> None:
        kind = element.kind
        if kind == NodeKind.TITLE:
            inner = self.ctx.text[element.inner_start:element.inner_end]
            if self.title_rule.text_only and "<" in inner:
                self._report(DiagnosticCode.TITLE_TEXT_ONLY, self.title_rule.message, element)
        elif kind == NodeKind.SPAN:
            for token in self.tree.tokens_within(element.inner_start, element.inner_end):
                if not token.is_close and token.name in self.span_rule.forbidden:
                    self._report(DiagnosticCode.SPAN_NO_DIV, self.span_rule.message, element)
                    break

    def _report(self, code: DiagnosticCode, message: str, element: ElementNode) -> None:
        log.debug("nesting_violation", code=code.value, element=element.name, offset=element.start)
        self.ctx.report_span(code, message, element.start, element.end)
        self.violations += 1


def validate_nesting(ctx: ValidationContext) -> ValidationContext:
    """Apply the nesting rules to every element under head and body."""
    visitor = _NestingVisitor(ctx)
    for section in (ctx.head, ctx.body):
        if section is not None:
            visitor.visit(section)

    log.verbose(
        "nesting_checked",
        elements=visitor.visited,
        violations=visitor.violations,
        max_depth=visitor.max_depth,
    )
    ctx.add_trace(PASS_NAME, "checked_nesting", detail=f"{visitor.violations} violations")
    return ctx

"""
Pass 10 — Tokenize and Build Tree

Scans the full text once for tag tokens and pairs them into an element
tree with source offsets. Unmatched tags never fail the pass.
"""

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.markup.tokenizer import tokenize
from minihtml.markup.tree import build_tree, iter_elements

PASS_NAME = "p10_parse"
log = get_pass_logger(PASS_NAME)


def parse(ctx: ValidationContext) -> ValidationContext:
    """Tokenize the snapshot and store the resulting DocumentTree."""
    tokens = tokenize(ctx.text)
    tree = build_tree(ctx.text, tokens, void_elements=ctx.rules.void_elements)

    elements = sum(1 for _ in iter_elements(tree.children))
    log.verbose(
        "parsed",
        chars=len(ctx.text),
        tokens=len(tokens),
        elements=elements,
        stray_closes=len(tree.stray_closes),
    )

    ctx.tree = tree
    ctx.add_trace(PASS_NAME, "built_tree", detail=f"{len(tokens)} tokens, {elements} elements")
    return ctx

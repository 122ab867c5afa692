"""
Pass 00 — Root Bounds

The trimmed document must begin with the literal ``<html>`` and end with
the literal ``</html>``. The two checks are independent and both may fire.
"""

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.ir.enums import DiagnosticCode
from minihtml.ir.schema import Range
from minihtml.markup.positions import utf16_len

PASS_NAME = "p00_root_bounds"
log = get_pass_logger(PASS_NAME)

ROOT_OPEN = "<html>"
ROOT_CLOSE = "</html>"
BYTE_ORDER_MARK = "\ufeff"


def trim(text: str) -> str:
    """Strip surrounding whitespace and a byte order mark, as editors do."""
    return text.strip().strip(BYTE_ORDER_MARK).strip()


def check_root_bounds(ctx: ValidationContext) -> ValidationContext:
    """
    Check the literal start and end of the document.

    Start violation: reported at (0,0)-(0,6).
    End violation: reported on the last line, over its last 7 characters.
    """
    trimmed = trim(ctx.text)
    violations = 0

    if not trimmed.startswith(ROOT_OPEN):
        ctx.report(
            DiagnosticCode.ROOT_START,
            ctx.rules.message("root_start"),
            Range.from_coords(0, 0, 0, len(ROOT_OPEN)),
        )
        violations += 1

    if not trimmed.endswith(ROOT_CLOSE):
        lines = ctx.text.split("\n")
        last_line = len(lines) - 1
        line_length = utf16_len(lines[last_line])
        ctx.report(
            DiagnosticCode.ROOT_END,
            ctx.rules.message("root_end"),
            Range.from_coords(
                last_line, max(0, line_length - len(ROOT_CLOSE)),
                last_line, line_length,
            ),
        )
        violations += 1

    log.verbose("root_bounds_checked", violations=violations)
    ctx.add_trace(PASS_NAME, "checked_root_bounds", detail=f"{violations} violations")
    return ctx

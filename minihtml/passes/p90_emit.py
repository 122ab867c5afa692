"""
Pass 90 — Diagnostic Emitter

Finalizes status and packages the ordered diagnostic list with the
document uri and version it was computed from.
"""

from minihtml.core.context import ValidationContext
from minihtml.core.logging import get_pass_logger
from minihtml.ir.enums import ValidationStatus

PASS_NAME = "p90_emit"
log = get_pass_logger(PASS_NAME)


def emit(ctx: ValidationContext) -> ValidationContext:
    """Build the ValidationResult for this pass."""
    if ctx.status == ValidationStatus.OK and ctx.diagnostics:
        ctx.status = ValidationStatus.INVALID

    ctx.add_trace(PASS_NAME, "emitted", detail=f"status={ctx.status.value}, diagnostics={len(ctx.diagnostics)}")
    ctx.result = ctx.to_result()

    log.info(
        "emitted",
        status=ctx.status.value,
        diagnostics=len(ctx.diagnostics),
    )
    return ctx

"""Shared document builders for the test suite."""

VALID_DOCUMENT = (
    "<html><head><title>T</title></head>"
    "<body><div><span>x</span></div></body></html>"
)


def wrap_body(content: str) -> str:
    """A valid document whose body holds ``content``."""
    return f"<html><head><title>T</title></head><body>{content}</body></html>"


def wrap_head(content: str) -> str:
    """A valid document whose head holds ``content``."""
    return f"<html><head>{content}</head><body><div>x</div></body></html>"


def codes(diagnostics) -> list[str]:
    return [d.code.value for d in diagnostics]


def run(ctx, *passes):
    for pass_fn in passes:
        ctx = pass_fn(ctx)
    return ctx

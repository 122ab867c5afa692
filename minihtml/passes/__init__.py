"""Passes — Pipeline stages of a validation pass."""

from minihtml.passes.p00_root_bounds import check_root_bounds
from minihtml.passes.p10_parse import parse
from minihtml.passes.p20_structure import match_structure
from minihtml.passes.p30_content import validate_body_content, validate_head_content
from minihtml.passes.p40_nesting import validate_nesting
from minihtml.passes.p90_emit import emit

__all__ = [
    "check_root_bounds",
    "parse",
    "match_structure",
    "validate_head_content",
    "validate_body_content",
    "validate_nesting",
    "emit",
]

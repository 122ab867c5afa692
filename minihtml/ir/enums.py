"""
IR Enums — Severities, rule codes and statuses.

No stringly-typed constants scattered across passes.
"""

from enum import Enum, IntEnum


class DiagnosticSeverity(IntEnum):
    """Editor-protocol severity levels (wire values 1..4)."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticCode(str, Enum):
    """
    Stable code for each structural rule.

    Every current rule reports at ERROR severity; the code tells a client
    which rule fired without parsing the message.
    """

    ROOT_START = "root_start"            # Rule 1: must start with <html>
    ROOT_END = "root_end"                # Rule 1: must end with </html>
    SINGLE_ROOT = "single_root"          # Only one top-level <html>
    HEAD_COUNT = "head_count"            # Rule 2: exactly one <head>
    BODY_COUNT = "body_count"            # Rule 2: exactly one <body>
    HEAD_CONTENT = "head_content"        # Rule 3: head children
    BODY_CONTENT = "body_content"        # Rule 4: body children
    TITLE_TEXT_ONLY = "title_text_only"  # Rule 5
    SPAN_NO_DIV = "span_no_div"          # Rule 6


class ValidationStatus(str, Enum):
    """Overall outcome of a validation pass."""

    OK = "ok"              # No diagnostics
    INVALID = "invalid"    # One or more structural violations
    ERROR = "error"        # Internal failure, diagnostics suppressed


class CompletionItemKind(IntEnum):
    """Subset of editor-protocol completion kinds used by the catalogue."""

    SNIPPET = 15
    TYPE_PARAMETER = 25


class InsertTextFormat(IntEnum):
    """How a completion's insert text is interpreted."""

    PLAIN_TEXT = 1
    SNIPPET = 2

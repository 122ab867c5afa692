"""
IR — Wire types shared by the engine, CLI and web surface.

Diagnostics are produced fresh per validation pass and handed to the
caller; nothing here carries identity beyond a single pass.
"""

from minihtml.ir.enums import (
    CompletionItemKind,
    DiagnosticCode,
    DiagnosticSeverity,
    InsertTextFormat,
    ValidationStatus,
)
from minihtml.ir.schema import (
    CompletionItem,
    Diagnostic,
    Position,
    Range,
    TraceEntry,
    ValidationResult,
)

__all__ = [
    # Enums
    "CompletionItemKind",
    "DiagnosticCode",
    "DiagnosticSeverity",
    "InsertTextFormat",
    "ValidationStatus",
    # Models
    "CompletionItem",
    "Diagnostic",
    "Position",
    "Range",
    "TraceEntry",
    "ValidationResult",
]

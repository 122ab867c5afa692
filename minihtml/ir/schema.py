"""
IR Schema — Pydantic models for diagnostics and results.

Positions follow the editor-protocol convention: zero-based lines and
UTF-16 code-unit columns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from minihtml.ir.enums import (
    CompletionItemKind,
    DiagnosticCode,
    DiagnosticSeverity,
    InsertTextFormat,
    ValidationStatus,
)

WIRE_VERSION = "0.1.0"
DIAGNOSTIC_SOURCE = "minihtml"


class Position(BaseModel):
    """A zero-based line/character location."""

    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0, description="UTF-16 code units from line start")


class Range(BaseModel):
    """A half-open span between two positions."""

    start: Position
    end: Position

    @classmethod
    def from_coords(cls, start_line: int, start_char: int, end_line: int, end_char: int) -> "Range":
        return cls(
            start=Position(line=start_line, character=start_char),
            end=Position(line=end_line, character=end_char),
        )


class Diagnostic(BaseModel):
    """A located structural violation."""

    severity: DiagnosticSeverity = Field(default=DiagnosticSeverity.ERROR)
    range: Range
    message: str
    code: DiagnosticCode = Field(..., description="Rule that produced this diagnostic")
    source: str = Field(default=DIAGNOSTIC_SOURCE)

    def to_wire(self) -> dict[str, Any]:
        """Editor-protocol shape of this diagnostic."""
        return self.model_dump(mode="json")


class TraceEntry(BaseModel):
    """A record of what one pass did."""

    pass_name: str
    action: str
    detail: Optional[str] = None


class ValidationResult(BaseModel):
    """The complete output of one validation pass over a document."""

    wire_version: str = Field(default=WIRE_VERSION)
    request_id: str
    uri: str = Field(..., description="Document identifier, passed through")
    version: int = Field(..., description="Document version the diagnostics were computed from")
    timestamp: datetime
    duration_ms: float = 0.0

    status: ValidationStatus = ValidationStatus.OK
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    trace: list[TraceEntry] = Field(default_factory=list)

    def to_publish_params(self) -> dict[str, Any]:
        """Notification envelope: uri, version and the full diagnostic batch."""
        return {
            "uri": self.uri,
            "version": self.version,
            "diagnostics": [d.to_wire() for d in self.diagnostics],
        }


class CompletionItem(BaseModel):
    """A static structural snippet offered to the editor."""

    label: str
    kind: CompletionItemKind = CompletionItemKind.TYPE_PARAMETER
    detail: str
    insert_text: str = Field(..., description="Template using ${n:placeholder} tab stops")
    insert_text_format: InsertTextFormat = InsertTextFormat.SNIPPET
    documentation: str = ""

    def to_wire(self) -> dict[str, Any]:
        """Editor-protocol field names (camelCase)."""
        return {
            "label": self.label,
            "kind": int(self.kind),
            "detail": self.detail,
            "insertText": self.insert_text,
            "insertTextFormat": int(self.insert_text_format),
            "documentation": self.documentation,
        }

"""
ValidationContext — State passed between validation passes.

Each pass reads prior artifacts and mutates only its allowed fields. A
context lives for exactly one validation pass over one text snapshot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from minihtml.ir.enums import DiagnosticCode, DiagnosticSeverity, ValidationStatus
from minihtml.ir.schema import Diagnostic, Range, TraceEntry, ValidationResult
from minihtml.markup.positions import LineIndex
from minihtml.markup.tree import DocumentTree, ElementNode
from minihtml.rules.models import RuleTable


@dataclass(frozen=True)
class ValidationRequest:
    """A read-only document snapshot handed to the engine."""

    uri: str
    version: int
    text: str
    request_id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class ValidationContext:
    """
    Mutable context passed through validation passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    # Input
    request: ValidationRequest
    rules: RuleTable
    lines: LineIndex

    # Structure (populated by p10_parse / p20_structure)
    tree: Optional[DocumentTree] = None
    html: Optional[ElementNode] = None
    head: Optional[ElementNode] = None
    body: Optional[ElementNode] = None

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # Output
    status: ValidationStatus = ValidationStatus.OK
    result: Optional[ValidationResult] = None

    # Internal
    start_time: datetime = field(default_factory=datetime.now)

    @property
    def text(self) -> str:
        return self.request.text

    @classmethod
    def from_request(cls, request: ValidationRequest, rules: RuleTable) -> "ValidationContext":
        """Create a context from a validation request."""
        return cls(
            request=request,
            rules=rules,
            lines=LineIndex(request.text),
        )

    def add_trace(self, pass_name: str, action: str, detail: Optional[str] = None) -> None:
        """Add a trace entry."""
        self.trace.append(TraceEntry(pass_name=pass_name, action=action, detail=detail))

    def report(
        self,
        code: DiagnosticCode,
        message: str,
        range: Range,
        severity: DiagnosticSeverity = DiagnosticSeverity.ERROR,
    ) -> Diagnostic:
        """Record a structural violation at an explicit range."""
        diagnostic = Diagnostic(severity=severity, range=range, message=message, code=code)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def report_span(self, code: DiagnosticCode, message: str, start: int, end: int) -> Diagnostic:
        """Record a structural violation covering text[start:end]."""
        return self.report(code, message, self.lines.range(start, end))

    def to_result(self, **overrides: Any) -> ValidationResult:
        """Convert context to the final ValidationResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        data = dict(
            request_id=self.request.request_id,
            uri=self.request.uri,
            version=self.request.version,
            timestamp=self.start_time,
            duration_ms=duration_ms,
            status=self.status,
            diagnostics=list(self.diagnostics),
            trace=list(self.trace),
        )
        data.update(overrides)
        return ValidationResult(**data)

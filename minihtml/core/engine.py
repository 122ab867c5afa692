"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order, contains failures,
and hands every result to the notification channel.

The engine is NOT where rule logic lives.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from minihtml.core.context import ValidationContext, ValidationRequest
from minihtml.core.logging import ValidationLogger
from minihtml.ir.enums import ValidationStatus
from minihtml.ir.schema import Diagnostic, ValidationResult
from minihtml.rules.loader import get_ruleset
from minihtml.rules.models import RuleTable

# Type alias for a pass function
PassFn = Callable[[ValidationContext], ValidationContext]

# Receives every result, including empty ones
PublishFn = Callable[[ValidationResult], None]

DEFAULT_PIPELINE = "default"


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order over one snapshot at a time. An exception inside
    a pass never reaches the caller: it is logged and the pass yields a
    result with status ``error`` and no diagnostics.
    """

    def __init__(self, rules: Optional[RuleTable] = None) -> None:
        self.rules = rules or get_ruleset()
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def validate_document(
        self,
        request: ValidationRequest,
        pipeline_id: Optional[str] = None,
        publish: Optional[PublishFn] = None,
    ) -> ValidationResult:
        """
        Run one validation pass.

        Args:
            request: The document snapshot
            pipeline_id: Which pipeline to use (default: 'default')
            publish: Notification channel; called with every result

        Returns:
            ValidationResult tagged with the request's uri and version

        Raises:
            KeyError: If the pipeline is not registered
        """
        pipeline_id = pipeline_id or DEFAULT_PIPELINE
        if pipeline_id not in self._pipelines:
            raise KeyError(f"Pipeline '{pipeline_id}' not registered")

        pipeline = self._pipelines[pipeline_id]
        ctx = ValidationContext.from_request(request, self.rules)
        vlog = ValidationLogger(request.request_id, request.uri, request.version)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                vlog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                vlog.pass_end(pass_name, diagnostics=len(ctx.diagnostics))
            except Exception as e:
                vlog.pass_error(pass_name, e)
                ctx.status = ValidationStatus.ERROR
                ctx.add_trace(pass_name, "error", detail=f"{type(e).__name__}: {e}")
                ctx.result = ctx.to_result(diagnostics=[])
                break

        result = ctx.result or ctx.to_result()

        vlog.validation_complete(
            status=result.status.value,
            diagnostics=len(result.diagnostics),
            chars=len(request.text),
        )

        if publish is not None:
            publish(result)
        return result


def setup_default_pipeline(engine: Engine) -> None:
    """Register the standard seven-rule pipeline."""
    from minihtml.passes import (
        check_root_bounds,
        emit,
        match_structure,
        parse,
        validate_body_content,
        validate_head_content,
        validate_nesting,
    )

    engine.register_pipeline(Pipeline(
        id=DEFAULT_PIPELINE,
        name="Mini HTML structural rules",
        passes=[
            check_root_bounds,      # Rule 1
            parse,
            match_structure,        # Rule 2
            validate_head_content,  # Rule 3
            validate_body_content,  # Rule 4
            validate_nesting,       # Rules 5-7
            emit,
        ],
    ))


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = Engine()
        setup_default_pipeline(_engine)
    return _engine


def reset_engine() -> None:
    """Drop the global engine (used after switching rulesets)."""
    global _engine
    _engine = None


def validate(document_uri: str, document_version: int, text: str) -> list[Diagnostic]:
    """
    Validate a snapshot and return its diagnostics.

    Args:
        document_uri: Document identifier (pass-through)
        document_version: Document version (pass-through)
        text: Full document text

    Returns:
        Ordered diagnostics; empty when the document is valid
    """
    request = ValidationRequest(uri=document_uri, version=document_version, text=text)
    return get_engine().validate_document(request).diagnostics

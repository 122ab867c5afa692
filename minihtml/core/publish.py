"""
Diagnostics channel — Delivery of per-version diagnostic batches.

Rapid edits produce overlapping, independent validation passes. Each batch
carries the document version it was computed from; a batch older than the
one already delivered for the same document is dropped.
"""

import threading
from typing import Optional

from minihtml.core.logging import LogChannel, get_logger
from minihtml.ir.schema import ValidationResult

log = get_logger(LogChannel.EMIT)


class DiagnosticsChannel:
    """Keeps the latest diagnostic batch per document URI."""

    def __init__(self) -> None:
        self._latest: dict[str, ValidationResult] = {}
        self._lock = threading.Lock()

    def publish(self, result: ValidationResult) -> bool:
        """
        Deliver a batch.

        Returns:
            True if the batch was accepted, False if it was stale
        """
        with self._lock:
            current = self._latest.get(result.uri)
            if current is not None and current.version > result.version:
                log.verbose(
                    "stale_batch_dropped",
                    uri=result.uri,
                    version=result.version,
                    current_version=current.version,
                )
                return False
            self._latest[result.uri] = result

        log.verbose(
            "diagnostics_published",
            uri=result.uri,
            version=result.version,
            diagnostics=len(result.diagnostics),
        )
        return True

    __call__ = publish

    def latest(self, uri: str) -> Optional[ValidationResult]:
        """The most recent accepted batch for a document, if any."""
        with self._lock:
            return self._latest.get(uri)

    def forget(self, uri: str) -> None:
        """Drop state for a closed document."""
        with self._lock:
            self._latest.pop(uri, None)

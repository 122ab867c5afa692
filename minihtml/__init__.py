"""
minihtml — Structural validator for the Mini HTML (.mhtml) dialect.

Checks documents against seven containment/cardinality rules and reports
line/column-addressed diagnostics suitable for editor integration.
"""

__version__ = "0.1.0"
__wire_version__ = "0.1.0"


def validate(document_uri: str, document_version: int, text: str):
    """
    Validate a document snapshot and return its diagnostics.

    Pure function of ``text``; ``document_uri`` and ``document_version`` only
    travel with the result envelope.
    """
    from minihtml.core.engine import validate as _validate

    return _validate(document_uri, document_version, text)


__all__ = ["validate", "__version__"]

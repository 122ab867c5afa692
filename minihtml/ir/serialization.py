"""
IR Serialization — JSON import/export for validation results.
"""

import json
from pathlib import Path
from typing import Union

from minihtml.ir.schema import ValidationResult


def to_json(result: ValidationResult, indent: int = 2) -> str:
    """Serialize a ValidationResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> ValidationResult:
    """Deserialize a ValidationResult from JSON string."""
    return ValidationResult.model_validate_json(json_str)


def to_publish_json(result: ValidationResult, indent: int = 2) -> str:
    """Serialize only the publish envelope (uri, version, diagnostics)."""
    return json.dumps(result.to_publish_params(), indent=indent)


def save(result: ValidationResult, path: Union[str, Path]) -> None:
    """Save a ValidationResult to a JSON file."""
    Path(path).write_text(to_json(result))


def load(path: Union[str, Path]) -> ValidationResult:
    """Load a ValidationResult from a JSON file."""
    return from_json(Path(path).read_text())

"""Validate a policy document against the bundled JSON schema."""

from __future__ import annotations

import json
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

DEFAULT_SCHEMA = Path(__file__).resolve().parents[1] / "policy.schema.json"


class PolicyValidationError(ValueError):
    """Raised when a policy document does not match the schema."""


def _load_schema(schema_path: Path) -> dict[str, Any]:
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_policy(document: Any, schema_path: Path = DEFAULT_SCHEMA) -> None:
    """Raise PolicyValidationError listing every schema violation in ``document``."""
    validator = Draft202012Validator(_load_schema(schema_path))
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise PolicyValidationError("\n" + _format_errors(errors))

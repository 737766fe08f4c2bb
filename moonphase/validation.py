"""Validation of data provider payloads."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

import jsonschema


@lru_cache(maxsize=None)
def load_schema() -> Dict[str, Any]:
    """Load the moon phases response schema.

    Returns:
        The JSON schema for a moon phases response
    """
    schema_path = Path(__file__).parent / "schema" / "phases_schema.json"
    with open(schema_path, encoding="utf-8") as f:
        return json.load(f)


def validate_phase_payload(payload: Any) -> Tuple[bool, List[str]]:
    """Validate a decoded moon phases response against the schema.

    Args:
        payload: The decoded JSON response

    Returns:
        A tuple of (is_valid, error_messages)
    """
    validator = jsonschema.Draft7Validator(load_schema())
    errors = sorted(
        validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]
    )

    if not errors:
        return True, []

    # Format error messages
    error_messages = []
    for error in errors:
        path = " -> ".join(str(p) for p in error.path)
        message = f"{path}: {error.message}" if path else error.message
        error_messages.append(message)

    return False, error_messages

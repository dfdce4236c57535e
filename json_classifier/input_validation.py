"""
Syntactic checks applied to pasted JSON before anything is sent for classification.
"""

from __future__ import annotations

import json

from json_classifier.classifier.errors import ValidationError

EMPTY_INPUT_MESSAGE = "JSON input cannot be empty."
INVALID_JSON_MESSAGE = "Invalid JSON format. Please enter valid JSON."


def _reject_constant(name: str) -> None:
    # NaN/Infinity are Python extensions, not JSON.
    raise ValueError(f"Unsupported JSON constant: {name}")


def validate_json_input(raw_text: str | None) -> str:
    """
    Return raw_text unchanged when it is non-empty, parseable JSON.
    """

    if raw_text is None or not raw_text.strip():
        raise ValidationError(EMPTY_INPUT_MESSAGE)
    try:
        json.loads(raw_text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ValidationError(INVALID_JSON_MESSAGE, details=str(exc)) from exc
    return raw_text


__all__ = ["EMPTY_INPUT_MESSAGE", "INVALID_JSON_MESSAGE", "validate_json_input"]

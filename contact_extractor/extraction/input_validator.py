"""
Input validator for :func:`~contact_extractor.extraction.pipeline.run_extraction`.

Wraps Pydantic validation (ExtractionInput) and converts validation errors
into a standardised error list so the pipeline can always return a valid
JSON envelope.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import ValidationError

from contact_extractor.models.input_schema import ExtractionInput


class InputValidationError(ValueError):
    """Raised when request validation fails (hard error)."""

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        self.validation_errors = errors
        messages = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(f"Input validation failed: {messages}")


def validate_input(raw: dict, max_text_length: int) -> ExtractionInput:
    """
    Validate a raw request dict against :class:`ExtractionInput`.

    Raises:
        :class:`InputValidationError` if a field is missing or invalid, or
        if ``text`` is longer than *max_text_length*.
    """
    try:
        parsed = ExtractionInput.model_validate(raw)
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        raise InputValidationError(errors) from exc

    check_text_length(parsed, max_text_length)
    return parsed


def check_text_length(parsed: ExtractionInput, max_text_length: int) -> None:
    if len(parsed.text) > max_text_length:
        raise InputValidationError([
            {
                "field": "text",
                "message": (
                    f"text exceeds maximum allowed length of {max_text_length} chars "
                    f"(got {len(parsed.text)})"
                ),
                "type": "text_too_long",
            }
        ])

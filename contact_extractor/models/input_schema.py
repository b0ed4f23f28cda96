"""
Input schema for :func:`~contact_extractor.extraction.pipeline.run_extraction`.

Validates the request payload handed over by a service handler or batch job.
The text length cap depends on runtime configuration and is enforced by
:func:`~contact_extractor.extraction.input_validator.validate_input`.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

SUPPORTED_KINDS = ("EMAIL", "PHONE")


class ExtractionInput(BaseModel):
    """Validated extraction request."""

    model_config = {"frozen": True, "extra": "ignore"}

    text: str = Field(..., description="Free text to scan (may be empty)")
    request_id: str = Field(default="UNKNOWN", min_length=1, description="Caller-side request identifier")
    kinds: List[str] = Field(
        default_factory=lambda: list(SUPPORTED_KINDS),
        description="Contact kinds to extract: EMAIL and/or PHONE",
    )
    include_matches: bool = Field(
        default=False,
        description="Also return every raw match with its offsets and detection source",
    )

    @field_validator("kinds")
    @classmethod
    def _validate_kinds(cls, v: List[str]) -> List[str]:
        normalised = [k.strip().upper() for k in v]
        unknown = [k for k in normalised if k not in SUPPORTED_KINDS]
        if unknown:
            raise ValueError(
                f"unsupported contact kind(s) {unknown}; expected any of {list(SUPPORTED_KINDS)}"
            )
        return normalised

    def wants(self, kind: str) -> bool:
        return kind in self.kinds

"""
Candidate model for contact matches (strict token pass / link scan).

Immutable (frozen=True): a candidate is owned by the detector that produced it
until it is merged into a result set.
"""
from __future__ import annotations

from dataclasses import dataclass

EMAIL = "EMAIL"
PHONE = "PHONE"

SOURCE_TOKEN = "token"
SOURCE_LINK_SCAN = "link_scan"


@dataclass(frozen=True)
class Candidate:
    """A single email or phone candidate with its provenance."""

    text: str
    """Surface form exactly as it appears in the source text."""

    label: str
    """Contact kind: 'EMAIL' | 'PHONE'."""

    start: int
    """Inclusive start offset (char index) in the input text."""

    end: int
    """Exclusive end offset (char index) in the input text."""

    source: str
    """Detection strategy: 'token' | 'link_scan'."""

    def to_dict(self) -> dict:
        """Serialise to the ``matches`` entry of the output envelope."""
        return {
            "type": self.label,
            "value": self.text,
            "span": {"start": self.start, "end": self.end},
            "source": self.source,
        }

    def __repr__(self) -> str:
        return (
            f"Candidate('{self.text}', {self.label}, [{self.start},{self.end}],"
            f" src={self.source})"
        )

"""
Output schema for :func:`~contact_extractor.extraction.pipeline.run_extraction`.

Produces a structured JSON envelope with ``emails``, ``phones``, ``matches``,
``meta`` and ``errors`` sections. The envelope is **always valid JSON** even on hard
failure (result lists are empty, ``meta.status`` is ``"failed"``).
"""
from __future__ import annotations

import json
import time
from typing import Any, Dict, List, Optional


class ExtractionOutput:
    """
    Mutable output object built incrementally by the pipeline.

    Serialised via :meth:`to_dict` / :meth:`to_json` once processing is complete.
    """

    def __init__(
        self,
        request_id: str,
        package_version: str,
        feature_flags: Optional[Dict[str, bool]] = None,
    ) -> None:
        self._request_id = request_id
        self._package_version = package_version
        self._feature_flags: Dict[str, bool] = feature_flags or {}

        self._emails: List[str] = []
        self._phones: List[str] = []
        self._matches: List[Dict[str, Any]] = []
        self._errors: List[Dict[str, str]] = []
        self._fallbacks: List[str] = []
        self._status: str = "ok"

        # Component-level timings (ms)
        self._timings: Dict[str, float] = {}
        self._start_ts: float = time.perf_counter()

    @property
    def status(self) -> str:
        return self._status

    @property
    def emails(self) -> List[str]:
        return list(self._emails)

    @property
    def phones(self) -> List[str]:
        return list(self._phones)

    # ------------------------------------------------------------------
    # Builder methods
    # ------------------------------------------------------------------

    def set_emails(self, emails: List[str]) -> None:
        self._emails = list(emails)

    def set_phones(self, phones: List[str]) -> None:
        self._phones = list(phones)

    def set_matches(self, matches: List[Dict[str, Any]]) -> None:
        """Set the serialised candidate matches (offsets and provenance)."""
        self._matches = list(matches)

    def add_fallback(self, description: str) -> None:
        """Register a skipped engine (e.g. link scan disabled by config)."""
        self._fallbacks.append(description)

    def set_failed(self, reason: str) -> None:
        """Mark the extraction as hard-failed. Result lists will be empty."""
        self._status = "failed"
        self._emails = []
        self._phones = []
        self._matches = []
        self._errors.append({"component": "pipeline", "message": reason})

    def record_timing(self, component: str, elapsed_ms: float) -> None:
        """Record elapsed milliseconds for a named pipeline component."""
        self._timings[component] = round(elapsed_ms, 3)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dict representing the full output contract."""
        total_ms = round((time.perf_counter() - self._start_ts) * 1000, 3)
        return {
            "emails": list(self._emails),
            "phones": list(self._phones),
            "matches": list(self._matches),
            "meta": {
                "request_id": self._request_id,
                "status": self._status,
                "package_version": self._package_version,
                "processing_time_ms": total_ms,
                "component_timings_ms": dict(self._timings),
                "feature_flags": dict(self._feature_flags),
                "fallbacks": list(self._fallbacks),
                "email_count": len(self._emails),
                "phone_count": len(self._phones),
            },
            "errors": list(self._errors),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialise to a JSON string. Always succeeds (safe fallback on error)."""
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
        except (TypeError, ValueError) as exc:
            return json.dumps({
                "emails": [],
                "phones": [],
                "matches": [],
                "meta": {
                    "request_id": self._request_id,
                    "status": "failed",
                    "package_version": self._package_version,
                    "processing_time_ms": 0.0,
                    "component_timings_ms": {},
                    "feature_flags": {},
                    "fallbacks": [],
                    "email_count": 0,
                    "phone_count": 0,
                },
                "errors": [{"component": "serialiser", "message": str(exc)}],
            }, ensure_ascii=False)

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"ExtractionOutput(status={self._status!r},"
            f" emails={len(self._emails)},"
            f" phones={len(self._phones)},"
            f" errors={len(self._errors)})"
        )

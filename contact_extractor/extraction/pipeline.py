"""
Contact extraction pipeline — request/response orchestration.

  Step 1. Input validation (types, requested kinds, size limit)
  Step 2. Email detection (strict token pass + link scan), if requested
  Step 3. Phone detection (token pass), if requested
  Step 4. Serialise to the ExtractionOutput JSON envelope (raw matches on request)

The pipeline is **side-effect free** apart from structured logging and
Prometheus metrics increments. It always returns a valid
:class:`~contact_extractor.models.output_schema.ExtractionOutput`; on hard
failure ``meta.status`` is ``"failed"`` and both result lists are empty.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from contact_extractor.config import PACKAGE_VERSION, ExtractorConfig
from contact_extractor.extraction.email_detector import email_candidates, emails_from_candidates
from contact_extractor.extraction.input_validator import (
    InputValidationError,
    check_text_length,
    validate_input,
)
from contact_extractor.extraction.phone_detector import phone_candidates, phones_from_candidates
from contact_extractor.models.candidate import EMAIL, PHONE, SOURCE_TOKEN, Candidate
from contact_extractor.models.input_schema import ExtractionInput
from contact_extractor.models.output_schema import ExtractionOutput
from contact_extractor.observability.logging import ExtractionLogger
from contact_extractor.observability.metrics import (
    ENGINE_SKIP_TOTAL,
    ERRORS_TOTAL,
    PIPELINE_RUNS,
    record_contact_counts,
    timer,
)

logger = logging.getLogger(__name__)


def run_extraction(
    raw_input: Union[dict, ExtractionInput],
    config: Optional[ExtractorConfig] = None,
) -> ExtractionOutput:
    """
    Extract emails and phone numbers from one request.

    Args:
        raw_input: Either a raw ``dict`` (validated internally) or a
                   pre-validated :class:`~contact_extractor.models.input_schema.ExtractionInput`.
        config:    Runtime configuration. ``None`` → :meth:`ExtractorConfig.default`.

    Returns:
        An :class:`~contact_extractor.models.output_schema.ExtractionOutput`
        that is always serialisable to valid JSON.
    """
    if config is None:
        config = ExtractorConfig.default()

    _request_id = "UNKNOWN"

    try:
        # ------------------------------------------------------------------
        # Step 1: Input validation
        # ------------------------------------------------------------------
        with timer("step1_validation") as t1:
            if isinstance(raw_input, ExtractionInput):
                parsed = raw_input
                check_text_length(parsed, config.max_text_length)
            else:
                parsed = validate_input(raw_input, config.max_text_length)

        _request_id = parsed.request_id

        output = ExtractionOutput(
            request_id=_request_id,
            package_version=PACKAGE_VERSION,
            feature_flags=config.feature_flags(),
        )
        output.record_timing("step1_validation", t1.elapsed_ms)
        req_log = ExtractionLogger(request_id=_request_id)

        # ------------------------------------------------------------------
        # Step 2: Emails
        # ------------------------------------------------------------------
        candidates: List[Candidate] = []
        emails: List[str] = []
        if parsed.wants(EMAIL):
            for engine, enabled in (
                ("strict_email", config.engine_strict_email_enabled),
                ("link_scan", config.engine_link_scan_enabled),
            ):
                if not enabled:
                    output.add_fallback(f"{engine} engine skipped (feature flag off)")
                    req_log.log_fallback(engine, "feature flag disabled")
                    ENGINE_SKIP_TOTAL.labels(engine=engine).inc()

            with timer("step2_emails") as t2:
                email_cands = email_candidates(parsed.text, config=config)
                emails = emails_from_candidates(email_cands)
            candidates.extend(email_cands)
            output.record_timing("step2_emails", t2.elapsed_ms)
            req_log.debug("emails_done", count=len(emails))

        # ------------------------------------------------------------------
        # Step 3: Phone numbers
        # ------------------------------------------------------------------
        phones: List[str] = []
        if parsed.wants(PHONE):
            if config.engine_phone_enabled:
                with timer("step3_phones") as t3:
                    phone_cands = phone_candidates(parsed.text)
                    phones = phones_from_candidates(phone_cands)
                candidates.extend(phone_cands)
                output.record_timing("step3_phones", t3.elapsed_ms)
                req_log.debug("phones_done", count=len(phones))
            else:
                output.add_fallback("phone engine skipped (feature flag off)")
                req_log.log_fallback("phone", "feature flag disabled")
                ENGINE_SKIP_TOTAL.labels(engine="phone").inc()

        # ------------------------------------------------------------------
        # Step 4: Envelope + observability
        # ------------------------------------------------------------------
        output.set_emails(emails)
        output.set_phones(phones)
        if parsed.include_matches:
            output.set_matches([c.to_dict() for c in _ordered(candidates)])

        record_contact_counts(emails, phones)
        req_log.log_result_summary(emails, phones)
        PIPELINE_RUNS.labels(outcome="ok").inc()

    except InputValidationError as exc:
        _output = _make_failed_output(_request_id, str(exc))
        ERRORS_TOTAL.labels(error_type="hard", component="input_validator").inc()
        PIPELINE_RUNS.labels(outcome="failed").inc()
        logger.error("Extraction hard failure (input validation): %s", exc)
        return _output

    except Exception as exc:  # noqa: BLE001
        # Unexpected hard failure: always return valid JSON
        _output = _make_failed_output(_request_id, f"Unexpected error: {exc}")
        ERRORS_TOTAL.labels(error_type="hard", component="pipeline").inc()
        PIPELINE_RUNS.labels(outcome="failed").inc()
        logger.exception("Extraction unexpected hard failure: %s", exc)
        return _output

    return output


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_failed_output(request_id: str, reason: str) -> ExtractionOutput:
    """Build a hard-failure output envelope."""
    out = ExtractionOutput(
        request_id=request_id,
        package_version=PACKAGE_VERSION,
    )
    out.set_failed(reason)
    return out


def _ordered(candidates: List[Candidate]) -> List[Candidate]:
    """Order raw matches by offset; ties keep EMAIL before PHONE, token before link_scan."""
    return sorted(candidates, key=lambda c: (c.start, c.label, c.source != SOURCE_TOKEN))

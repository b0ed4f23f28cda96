"""
Email detector.

Two independent passes whose outputs are unioned before normalisation:

  1. Strict pass — every whitespace token tested with :func:`is_email`.
  2. Link scan  — the whole text scanned by :func:`scan_email_links`,
     catching emails glued to punctuation that the strict pass misses.

The link-scan texts are deduplicated on their own, then merged with the
strict texts, lowercased, sorted and deduplicated.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from contact_extractor.extraction.link_scanner import scan_email_links
from contact_extractor.extraction.normalizer import merge_results, normalize_results
from contact_extractor.extraction.predicates import is_email
from contact_extractor.extraction.tokenizer import iter_tokens
from contact_extractor.models.candidate import EMAIL, SOURCE_LINK_SCAN, SOURCE_TOKEN, Candidate

if TYPE_CHECKING:
    from contact_extractor.config import ExtractorConfig

logger = logging.getLogger(__name__)


def strict_email_candidates(text: str) -> List[Candidate]:
    """Return the whitespace tokens of *text* accepted by the strict email predicate."""
    return [
        Candidate(text=token, label=EMAIL, start=start, end=end, source=SOURCE_TOKEN)
        for token, start, end in iter_tokens(text)
        if is_email(token)
    ]


def email_candidates(text: str, config: Optional["ExtractorConfig"] = None) -> List[Candidate]:
    """
    Return the raw candidates of both passes: strict tokens first, then link-scan matches.

    ``config`` engine flags can switch either pass off; ``None`` runs both.
    """
    strict_enabled = config.engine_strict_email_enabled if config else True
    link_scan_enabled = config.engine_link_scan_enabled if config else True

    candidates: List[Candidate] = []
    if strict_enabled:
        candidates.extend(strict_email_candidates(text))
    if link_scan_enabled:
        candidates.extend(scan_email_links(text))
    return candidates


def emails_from_candidates(candidates: Sequence[Candidate]) -> List[str]:
    """Build the email Result Set from the candidates of :func:`email_candidates`."""
    strict = [c.text for c in candidates if c.source == SOURCE_TOKEN]
    linked = normalize_results(c.text for c in candidates if c.source == SOURCE_LINK_SCAN)

    emails = normalize_results(merge_results(strict, linked), lowercase=True)
    logger.debug(
        "find_emails: strict=%d link_scan=%d result=%d",
        len(strict), len(linked), len(emails),
    )
    return emails


def find_emails(text: str, config: Optional["ExtractorConfig"] = None) -> List[str]:
    """
    Return the lowercase, deduplicated, ascending list of emails found in *text*.

    Args:
        text:   Free text. Empty or match-free text yields ``[]``.
        config: Optional :class:`~contact_extractor.config.ExtractorConfig`;
                its engine flags can switch either pass off. ``None`` runs both.
    """
    return emails_from_candidates(email_candidates(text, config=config))

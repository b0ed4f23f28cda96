"""
Email link scanner — whole-text recall safety net.

Unlike the strict predicate, which only sees whitespace-delimited tokens,
the scanner walks the untokenised text and picks out email-shaped
substrings wherever they sit: next to commas, trailing periods, brackets,
quotes or a ``mailto:`` prefix.
"""
from __future__ import annotations

import logging
from typing import List

from contact_extractor.extraction.patterns import EMAIL_LINK, get_pattern
from contact_extractor.models.candidate import EMAIL, SOURCE_LINK_SCAN, Candidate

logger = logging.getLogger(__name__)


def scan_email_links(text: str) -> List[Candidate]:
    """
    Return every email-shaped substring of *text* in input order.

    Matches are reported verbatim (original casing) with their offsets.
    Leading dots of the local part are not part of the address.
    """
    candidates: List[Candidate] = []
    for match in get_pattern(EMAIL_LINK).finditer(text):
        local = match.group("local")
        skipped = len(local) - len(local.lstrip("."))
        if skipped == len(local):
            continue
        start = match.start() + skipped
        candidates.append(
            Candidate(
                text=text[start:match.end()],
                label=EMAIL,
                start=start,
                end=match.end(),
                source=SOURCE_LINK_SCAN,
            )
        )
    logger.debug("Link scan found %d email candidate(s)", len(candidates))
    return candidates

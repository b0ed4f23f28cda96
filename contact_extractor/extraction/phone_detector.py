"""
Phone detector.

Token-only: there is no whole-text safety net for phone numbers, so a number
split across whitespace is only found if one token carries the full shape.
Tokens are returned with their original punctuation.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from contact_extractor.extraction.normalizer import normalize_results
from contact_extractor.extraction.predicates import is_phone
from contact_extractor.extraction.tokenizer import iter_tokens
from contact_extractor.models.candidate import PHONE, SOURCE_TOKEN, Candidate

if TYPE_CHECKING:
    from contact_extractor.config import ExtractorConfig

logger = logging.getLogger(__name__)


def phone_candidates(text: str) -> List[Candidate]:
    return [
        Candidate(text=token, label=PHONE, start=start, end=end, source=SOURCE_TOKEN)
        for token, start, end in iter_tokens(text)
        if is_phone(token)
    ]


def phones_from_candidates(candidates: Sequence[Candidate]) -> List[str]:
    phones = normalize_results(c.text for c in candidates)
    logger.debug("find_phone_nums: result=%d", len(phones))
    return phones


def find_phone_nums(text: str, config: Optional["ExtractorConfig"] = None) -> List[str]:
    """Return the deduplicated, ascending list of phone-shaped tokens in *text*."""
    if config is not None and not config.engine_phone_enabled:
        return []
    return phones_from_candidates(phone_candidates(text))

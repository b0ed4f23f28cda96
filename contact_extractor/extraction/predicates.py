"""
Per-token classification predicates.

Both predicates are single regex evaluations over one whitespace-free token,
with no state kept between tokens.
"""
from __future__ import annotations

from typing import Optional

from contact_extractor.extraction.patterns import PHONE, STRICT_EMAIL, get_pattern


def is_email(token: str) -> bool:
    """
    Return True if *token* ends in an ``@word.word`` domain suffix.

    Tokens holding more than one ``@`` are rejected. No local part is
    required, so ``"@example.com"`` is accepted.
    """
    if token.count("@") > 1:
        return False
    return get_pattern(STRICT_EMAIL).search(token) is not None


def is_phone(token: str) -> bool:
    """Return True if a North-American-style number appears anywhere in *token*."""
    return get_pattern(PHONE).search(token) is not None


class ContactClassifier:
    """Stateless object seam over :func:`is_email` / :func:`is_phone`."""

    def is_email(self, token: str) -> bool:
        return is_email(token)

    def is_phone(self, token: str) -> bool:
        return is_phone(token)

    def email_or_none(self, token: str) -> Optional[str]:
        """Return *token* if it classifies as an email, else None."""
        return token if is_email(token) else None

    def phone_or_none(self, token: str) -> Optional[str]:
        """Return *token* if it classifies as a phone number, else None."""
        return token if is_phone(token) else None

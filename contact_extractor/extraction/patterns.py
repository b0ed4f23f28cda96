"""
Fixed regex sources and the process-wide compiled-pattern cache.

Each pattern is compiled lazily, exactly once, behind a lock, and is
immutable afterwards, so compiled patterns can be shared by any number of
concurrent callers.
"""
from __future__ import annotations

import logging
import re
import threading
from typing import Dict, Pattern, Tuple

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pattern sources
# ---------------------------------------------------------------------------

STRICT_EMAIL = "strict_email"
PHONE = "phone"
EMAIL_LINK = "email_link"

# Domain-side shape only: '@', word chars, '.', word chars, end of token.
_STRICT_EMAIL_SOURCE = r"""
    @
    \w+
    \.
    \w+$
"""

_PHONE_SOURCE = r"""
    (?:\+?1)?                       # country code, optional
    [\s.]?
    (?:[2-9]\d{2}|\([2-9]\d{2}\))   # area code
    [\s.\-]?
    [2-9]\d{2}                      # exchange code
    [\s.\-]?
    \d{4}                           # subscriber number
"""

# Whole-text email scan. Surrounding punctuation (quotes, brackets, commas,
# trailing dots, 'mailto:') never joins the match. Letters and digits are
# Unicode ([^\W_]), so internationalised addresses are found.
#
# A match may only start where a run of local-part characters begins ('.'
# included in the lookbehind), so every run is scanned once. Leading dots of
# the run are trimmed by the scanner.
_EMAIL_LINK_SOURCE = r"""
    (?<![\w!#$%*+^~.\-])
    (?P<local>[\w!#$%*+^~.\-]+)
    @
    (?P<domain>
        [^\W_](?:(?:[^\W_]|-)*[^\W_])?
        (?:\.[^\W_](?:(?:[^\W_]|-)*[^\W_])?)+     # at least one dot
    )
"""

_PATTERN_SOURCES: Dict[str, Tuple[str, int]] = {
    STRICT_EMAIL: (_STRICT_EMAIL_SOURCE, re.VERBOSE | re.ASCII),
    PHONE: (_PHONE_SOURCE, re.VERBOSE),
    EMAIL_LINK: (_EMAIL_LINK_SOURCE, re.VERBOSE),
}

# ---------------------------------------------------------------------------
# Thread-safe lazy pattern cache
# ---------------------------------------------------------------------------

_pattern_lock = threading.Lock()
_compiled: Dict[str, Pattern[str]] = {}


def get_pattern(name: str) -> Pattern[str]:
    """
    Return the compiled pattern registered under *name*, compiling it on first use.

    A malformed pattern source raises :class:`re.error` here; that is a
    programming error and is not caught.
    """
    pattern = _compiled.get(name)
    if pattern is not None:
        return pattern

    with _pattern_lock:
        pattern = _compiled.get(name)
        if pattern is None:
            source, flags = _PATTERN_SOURCES[name]
            pattern = re.compile(source, flags)
            _compiled[name] = pattern
            logger.debug("Compiled %s pattern", name)
        return pattern

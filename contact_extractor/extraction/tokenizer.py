"""Whitespace tokenizer shared by the token-based detectors."""
from __future__ import annotations

import re
from typing import Iterator, Tuple

# Unicode White_Space only. The ASCII separators \x1c-\x1f are not whitespace
# here, although str.split() and \s treat them as such.
_WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
_TOKEN_RE = re.compile(f"[^{_WHITESPACE}]+")


def iter_tokens(text: str) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(token, start, end)`` for every maximal whitespace-free run in *text*."""
    for match in _TOKEN_RE.finditer(text):
        yield match.group(0), match.start(), match.end()

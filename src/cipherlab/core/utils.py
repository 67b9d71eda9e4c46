from __future__ import annotations

import math
import re
from collections import Counter

_NON_ASCII_LETTER_RE = re.compile(r"[^A-Za-z]+")


def normalize_az(s: str) -> str:
    """Keep only ASCII letters, uppercased."""
    if s is None:
        return ""
    # strip before upper(): some non-ASCII letters upper-case into A-Z
    return _NON_ASCII_LETTER_RE.sub("", s).upper()


def letter_counts(s: str) -> Counter:
    """Counter over A-Z for the letters-only projection of s."""
    return Counter(normalize_az(s))


def shannon_entropy(s: str) -> float:
    """Shannon entropy in bits/char."""
    if not s:
        return 0.0
    counts = Counter(s)
    n = len(s)
    ent = 0.0
    for c in counts.values():
        p = c / n
        ent -= p * math.log2(p)
    return ent

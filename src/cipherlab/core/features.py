from __future__ import annotations

import logging
from collections import Counter

from cipherlab.classical.common import ALPHABET
from .results import FrequencyEntry, FrequencyTable, TextFeatures
from .utils import letter_counts, normalize_az, shannon_entropy

log = logging.getLogger(__name__)

# Reference points for interpreting an IC value.
ENGLISH_IOC = 0.067
RANDOM_IOC = 0.038


def _ioc_from_counts(counts: Counter, n: int) -> float:
    if n <= 1:
        return 0.0
    num = sum(c * (c - 1) for c in counts.values())
    return num / (n * (n - 1))


def index_of_coincidence(text: str) -> float:
    """
    IC = sum(n_i * (n_i - 1)) / (N * (N - 1)) over A-Z, case-folded.
    Returns 0.0 when there are fewer than two letters.
    """
    counts = letter_counts(text)
    n = sum(counts.values())
    ic = _ioc_from_counts(counts, n)
    log.debug("index_of_coincidence: N=%d ic=%.5f", n, ic)
    return ic


def frequency_analysis(text: str, *, include_all: bool = False) -> FrequencyTable:
    """
    Count A-Z (case-folded); everything else is ignored and doesn't count toward the total.

    Entries are ordered by count descending, equal counts alphabetically.
    Only observed letters are reported unless include_all=True, which adds
    zero rows so all 26 letters are present.
    """
    counts = letter_counts(text)
    total = sum(counts.values())

    letters = ALPHABET if include_all else counts.keys()
    entries = []
    for letter in letters:
        count = counts.get(letter, 0)
        pct = round(count / total * 100, 2) if total > 0 else 0.0
        entries.append(FrequencyEntry(letter=letter, count=count, frequency_percent=pct))

    entries.sort(key=lambda e: (-e.count, e.letter))
    log.debug("frequency_analysis: total=%d distinct=%d", total, len(counts))
    return FrequencyTable(entries=tuple(entries), total_letters=total)


def ioc_scan(text: str, max_len: int = 20) -> list[tuple[int, float]]:
    """
    Average column IC for each candidate period 1..max_len, best first.
    A Vigenère period shows up as columns that look like English again.
    """
    az = normalize_az(text)
    if len(az) < 2:
        return []

    scores = []
    for k in range(1, max_len + 1):
        cols = [az[i::k] for i in range(k)]
        avg = sum(_ioc_from_counts(Counter(col), len(col)) for col in cols) / k
        scores.append((k, avg))

    return sorted(scores, key=lambda x: x[1], reverse=True)


def analyze_text(text: str) -> dict:
    """Summary features of a text (length, letter stats, entropy, IC)."""
    az = normalize_az(text)
    n = len(text)
    if n == 0:
        return TextFeatures(
            length=0,
            letters=0,
            unique_letters=0,
            alpha_ratio=0.0,
            entropy=0.0,
            ioc=0.0,
        ).to_dict()

    feats = TextFeatures(
        length=n,
        letters=len(az),
        unique_letters=len(set(az)),
        alpha_ratio=len(az) / n,
        entropy=shannon_entropy(az),
        ioc=index_of_coincidence(az),
    )
    return feats.to_dict()

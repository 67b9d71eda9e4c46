"""
Kasiski examination.

Repeated trigrams in a Vigenère ciphertext tend to sit a multiple of the key
length apart. We collect the gaps between successive occurrences of every
repeated trigram, take the GCD of all of them, and offer its small divisors
as key-length candidates.

Only consecutive gaps feed the GCD (not every pairwise gap). A single
accidental repeat can collapse the GCD to 1, in which case there is simply
no suggestion.
"""

from __future__ import annotations

import logging
import math
from functools import reduce
from typing import Iterable, Optional

from cipherlab.config import DEFAULT_CONFIG, AnalysisConfig
from .ngrams import build_ngram_index, consecutive_distances, repeated_ngrams
from .results import KasiskiResult, RepeatedSequence

log = logging.getLogger(__name__)


def gcd_of(values: Iterable[int]) -> Optional[int]:
    """GCD across all values; None when there are none."""
    vals = list(values)
    if not vals:
        return None
    return reduce(math.gcd, vals)


def candidate_key_lengths(g: Optional[int], max_key_length: int = 20) -> list[int]:
    """Divisors d of g with 2 <= d <= min(g, max_key_length), ascending."""
    if not g:
        return []
    return [d for d in range(2, min(g, max_key_length) + 1) if g % d == 0]


def kasiski_examination(ciphertext: str, config: Optional[AnalysisConfig] = None) -> KasiskiResult:
    cfg = config or DEFAULT_CONFIG

    index = build_ngram_index(ciphertext, n=cfg.ngram_length)

    sequences: list[RepeatedSequence] = []
    distances: list[int] = []
    for gram, positions in repeated_ngrams(index).items():
        gaps = consecutive_distances(positions)
        distances.extend(gaps)
        sequences.append(
            RepeatedSequence(sequence=gram, positions=tuple(positions), distances=tuple(gaps))
        )

    g = gcd_of(distances)
    candidates = candidate_key_lengths(g, cfg.max_key_length)
    suggested = candidates[0] if candidates else None

    log.debug(
        "kasiski: %d repeated %d-grams, %d distances, gcd=%s, candidates=%s",
        len(sequences),
        cfg.ngram_length,
        len(distances),
        g,
        candidates,
    )

    return KasiskiResult(
        repeated_sequences=tuple(sequences),
        all_distances=tuple(distances),
        candidate_key_lengths=tuple(candidates),
        suggested_key_length=suggested,
        gcd=g,
        display_limit=cfg.display_limit,
    )

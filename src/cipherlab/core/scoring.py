from __future__ import annotations

import logging
import re
from collections import Counter
from functools import lru_cache
from typing import Optional

from cipherlab.config import DEFAULT_CONFIG, AnalysisConfig
from .results import FrequencyTable
from .utils import normalize_az

log = logging.getLogger(__name__)

# ----------------------------
# English reference data
# ----------------------------

# Expected English letter frequencies, in percent.
ENGLISH_FREQUENCIES: dict[str, float] = {
    "A": 8.2, "B": 1.3, "C": 2.8, "D": 4.3, "E": 12.7, "F": 2.2, "G": 2.0, "H": 6.1, "I": 7.0,
    "J": 0.15, "K": 0.8, "L": 4.0, "M": 2.4, "N": 6.7, "O": 7.5, "P": 1.9, "Q": 0.10, "R": 6.0,
    "S": 6.3, "T": 9.1, "U": 2.8, "V": 1.0, "W": 2.4, "X": 0.15, "Y": 2.0, "Z": 0.07,
}


# ----------------------------
# Readability heuristic
# ----------------------------

@lru_cache(maxsize=32)
def _word_pattern(word: str) -> re.Pattern[str]:
    # re.ASCII so \b treats only [A-Za-z0-9_] as word characters
    return re.compile(rf"\b{re.escape(word)}\b", re.ASCII)


def readability_score(text: str, config: Optional[AnalysisConfig] = None) -> float:
    """
    Rough "does this look like English" score for brute-force ranking.

    Each whole-word hit of a common short word adds its length; every E and T
    adds 0.5 more. Approximate and easy to fool on short or adversarial text,
    but fully deterministic.
    """
    cfg = config or DEFAULT_CONFIG
    upper = text.upper()
    score = 0.0
    for word in cfg.common_words:
        hits = len(_word_pattern(word).findall(upper))
        score += hits * len(word)

    bonus_hits = sum(upper.count(ch) for ch in cfg.bonus_letters)
    score += bonus_hits * cfg.letter_bonus
    return score


# ----------------------------
# Frequency comparison
# ----------------------------

def chi_squared_english(text: str) -> float:
    """Lower is better."""
    s = normalize_az(text)
    n = len(s)
    if n == 0:
        return float("inf")

    counts = Counter(s)
    chi2 = 0.0
    for ch, expected_pct in ENGLISH_FREQUENCIES.items():
        observed = counts.get(ch, 0)
        expected = expected_pct / 100.0 * n
        chi2 += (observed - expected) ** 2 / expected
    return chi2


def compare_to_english(table: FrequencyTable) -> list[dict]:
    """
    One row per letter A..Z: observed %, expected English %, and the difference.
    Letters missing from the table count as 0%.
    """
    observed = table.percentages()
    rows = []
    for letter, expected in ENGLISH_FREQUENCIES.items():
        obs = observed.get(letter, 0.0)
        rows.append(
            {
                "letter": letter,
                "observed": obs,
                "expected": expected,
                "difference": round(obs - expected, 2),
            }
        )
    log.debug("compare_to_english: %d letters observed", len(observed))
    return rows

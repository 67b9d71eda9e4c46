from __future__ import annotations

import logging
from typing import Optional, Union

from cipherlab.config import AnalysisConfig
from cipherlab.core.registry import register_plugin
from cipherlab.core.results import BruteForceResult, SolveResult
from cipherlab.core.scoring import readability_score
from cipherlab.core.utils import normalize_az
from cipherlab.classical.common import shift_text

log = logging.getLogger(__name__)


def _parse_shift(shift: Union[int, str]) -> int:
    try:
        return int(shift)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Caesar shift must be an integer, got {shift!r}.") from e


def effective_shift(shift: Union[int, str], decrypt: bool = False) -> int:
    """
    Forward shift in 0..25 that performs the requested operation.
    Decrypting by s is encrypting by (26 - s mod 26) mod 26, so s=0 and s=26 stay 0.
    """
    s = _parse_shift(shift) % 26
    if decrypt:
        return (26 - s) % 26
    return s


def caesar_cipher(text: str, shift: Union[int, str], decrypt: bool = False) -> str:
    """Shift every ASCII letter; case is kept and everything else passes through."""
    return shift_text(text, effective_shift(shift, decrypt))


def brute_force_caesar(ciphertext: str, config: Optional[AnalysisConfig] = None) -> list[BruteForceResult]:
    """
    Decrypt with every shift 1..25 (0 is the identity), best readability first.
    Equal scores keep ascending shift order.
    """
    results = []
    for shift in range(1, 26):
        pt = caesar_cipher(ciphertext, shift, decrypt=True)
        results.append(BruteForceResult(shift=shift, text=pt, score=readability_score(pt, config)))

    # list.sort is stable, so ties stay in shift order
    results.sort(key=lambda r: r.score, reverse=True)
    if results:
        log.debug("brute_force_caesar: best shift=%d score=%.1f", results[0].shift, results[0].score)
    return results


def _should_try(text: str) -> bool:
    return len(normalize_az(text)) >= 4


class CaesarCipher:
    name = "caesar"

    def encrypt(self, plaintext: str, key: str) -> str:
        return caesar_cipher(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return caesar_cipher(ciphertext, key, decrypt=True)

    def crack(self, ciphertext: str, config: Optional[AnalysisConfig] = None) -> list[SolveResult]:
        return [
            SolveResult(
                cipher_name=self.name,
                plaintext=r.text,
                key=str(r.shift),
                score=r.score,
                notes=f"Caesar shift {r.shift}",
            )
            for r in brute_force_caesar(ciphertext, config)
        ]


register_plugin(CaesarCipher(), should_try=_should_try)

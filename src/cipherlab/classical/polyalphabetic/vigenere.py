from __future__ import annotations

import logging
from typing import Optional

from cipherlab.config import DEFAULT_CONFIG, AnalysisConfig
from cipherlab.core.features import ioc_scan
from cipherlab.core.kasiski import kasiski_examination
from cipherlab.core.registry import register_plugin
from cipherlab.core.results import SolveResult
from cipherlab.core.scoring import chi_squared_english, readability_score
from cipherlab.core.utils import normalize_az
from cipherlab.classical.common import A_ORD, decode_letter, encode_letter, norm_key_alpha, shift_char

log = logging.getLogger(__name__)

# Below this many letters the column statistics are noise.
MIN_CRACK_LETTERS = 20


def vigenere_cipher(text: str, key: str, decrypt: bool = False) -> str:
    """
    Polyalphabetic shift with a repeating key.

    The key is uppercased and stripped to A-Z; if nothing is left the text is
    returned unchanged. The key position advances only on letters, and each
    output letter keeps the case of its input letter.
    """
    k = norm_key_alpha(key)
    if not k:
        return text
    shifts = [ord(ch) - A_ORD for ch in k]

    out = []
    j = 0
    for ch in text:
        enc = encode_letter(ch)
        if enc is None:
            out.append(ch)
            continue
        value, upper = enc
        shift = shifts[j % len(shifts)]
        if decrypt:
            value = (value - shift + 26) % 26
        else:
            value = (value + shift) % 26
        out.append(decode_letter(value, upper))
        j += 1
    return "".join(out)


def _reduce_repeating_key(key: str) -> str:
    """
    If a key is a perfect repetition of a shorter pattern, reduce it.
    Example: CYBERCYBER -> CYBER
    """
    k = norm_key_alpha(key)
    if not k:
        return key

    for p in range(1, len(k) // 2 + 1):
        if len(k) % p != 0:
            continue
        base = k[:p]
        if base * (len(k) // p) == k:
            return base

    return k


def candidate_lengths(ciphertext: str, config: Optional[AnalysisConfig] = None, ioc_top: int = 5) -> list[int]:
    """Kasiski candidates first, then the best IoC-scan periods; no duplicates."""
    cfg = config or DEFAULT_CONFIG
    az = normalize_az(ciphertext)

    lens: list[int] = list(kasiski_examination(az, cfg).candidate_key_lengths)

    # need a few letters per column for the IoC to mean anything
    max_len = min(cfg.max_key_length, max(2, len(az) // 4))
    scan = [(k, v) for k, v in ioc_scan(az, max_len=max_len) if k >= 2]
    for klen, _ in scan[:ioc_top]:
        if klen not in lens:
            lens.append(klen)
    return lens


def _best_shift(column: str) -> int:
    """Shift whose decryption of the column is closest to English letter frequencies."""
    best, best_chi = 0, float("inf")
    for shift in range(26):
        dec = "".join(shift_char(ch, -shift) for ch in column)
        chi = chi_squared_english(dec)
        if chi < best_chi:
            best, best_chi = shift, chi
    return best


def recover_key(ciphertext: str, key_length: int) -> str:
    az = normalize_az(ciphertext)
    cols = [az[i::key_length] for i in range(key_length)]
    return "".join(chr(A_ORD + _best_shift(col)) for col in cols if col)


def _should_try(text: str) -> bool:
    return len(normalize_az(text)) >= MIN_CRACK_LETTERS


class VigenereCipher:
    name = "vigenere"

    def encrypt(self, plaintext: str, key: str) -> str:
        return vigenere_cipher(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return vigenere_cipher(ciphertext, key, decrypt=True)

    def crack(self, ciphertext: str, config: Optional[AnalysisConfig] = None) -> list[SolveResult]:
        """
        Key length from Kasiski + IoC, then per-column chi-squared for each key letter.
        Heuristic: expects a reasonably long English plaintext.
        """
        if len(normalize_az(ciphertext)) < MIN_CRACK_LETTERS:
            return []

        results: list[SolveResult] = []
        seen: set[str] = set()
        for klen in candidate_lengths(ciphertext, config):
            key = _reduce_repeating_key(recover_key(ciphertext, klen))
            if not key or key in seen:
                continue
            seen.add(key)

            pt = vigenere_cipher(ciphertext, key, decrypt=True)
            chi = chi_squared_english(pt)
            results.append(
                SolveResult(
                    cipher_name=self.name,
                    plaintext=pt,
                    key=key,
                    score=readability_score(pt, config),
                    notes=f"Column chi-squared keylen={klen}",
                    meta={"key_length": klen, "chi_squared": round(chi, 2)},
                )
            )

        results.sort(key=lambda r: (-r.score, r.meta["chi_squared"]))
        if results:
            log.debug("vigenere crack: best key=%s score=%.1f", results[0].key, results[0].score)
        return results


register_plugin(VigenereCipher(), should_try=_should_try)

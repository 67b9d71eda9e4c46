"""
Worked examples for teaching: formulas, key space, and per-letter steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from cipherlab.classical.common import A_ORD, norm_key_alpha
from .utils import normalize_az

CAESAR_KEY_SPACE = 25


@dataclass(frozen=True)
class VigenereStep:
    text_letter: str
    key_letter: str
    text_value: int
    key_value: int
    result_value: int
    formula: str

    @property
    def result_letter(self) -> str:
        return chr(A_ORD + self.result_value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "textLetter": self.text_letter,
            "keyLetter": self.key_letter,
            "formula": self.formula,
            "resultLetter": self.result_letter,
        }

    def __str__(self) -> str:
        return f"{self.text_letter} + {self.key_letter}: {self.formula} → {self.result_letter}"


def caesar_formula(shift: Union[int, str], decrypt: bool = False) -> str:
    s = int(shift)
    if decrypt:
        return f"D(x) = (x - {s}) mod 26"
    return f"E(x) = (x + {s}) mod 26"


def letter_example(text: str, shift: Union[int, str], decrypt: bool = False) -> str:
    """Show what happens to the first letter of text, e.g. "'H' → 'K'"."""
    az = normalize_az(text)
    if not az:
        return ""
    letter = az[0]
    x = ord(letter) - A_ORD
    s = int(shift) % 26
    y = (x - s + 26) % 26 if decrypt else (x + s) % 26
    return f"'{letter}' → '{chr(A_ORD + y)}'"


def vigenere_formula(decrypt: bool = False) -> str:
    if decrypt:
        return "D(i) = (C(i) - K(i mod m) + 26) mod 26, m = key length"
    return "E(i) = (P(i) + K(i mod m)) mod 26, m = key length"


def vigenere_steps(text: str, key: str, decrypt: bool = False, limit: int = 10) -> list[VigenereStep]:
    """Per-letter arithmetic over the letters-only text, at most `limit` steps."""
    k = norm_key_alpha(key)
    az = normalize_az(text)
    if not k or not az:
        return []

    steps = []
    for i, ch in enumerate(az[:limit]):
        kc = k[i % len(k)]
        p, kv = ord(ch) - A_ORD, ord(kc) - A_ORD
        if decrypt:
            r = (p - kv + 26) % 26
            formula = f"({p} - {kv} + 26) mod 26 = {r}"
        else:
            r = (p + kv) % 26
            formula = f"({p} + {kv}) mod 26 = {r}"
        steps.append(
            VigenereStep(
                text_letter=ch,
                key_letter=kc,
                text_value=p,
                key_value=kv,
                result_value=r,
                formula=formula,
            )
        )
    return steps


def key_space(cipher_name: str, key: str = "") -> int:
    """Number of usable keys: 25 for Caesar, 26**m for an m-letter Vigenère key (0 if empty)."""
    name = cipher_name.lower().strip()
    if name == "caesar":
        return CAESAR_KEY_SPACE
    if name == "vigenere":
        m = len(norm_key_alpha(key))
        return 26**m if m else 0
    raise ValueError(f"No key space defined for cipher '{cipher_name}'.")

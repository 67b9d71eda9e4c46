from __future__ import annotations

import string
from typing import Optional, Tuple

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")

_ASCII_LETTERS = frozenset(string.ascii_letters)


def is_letter(ch: str) -> bool:
    """True only for ASCII A-Z / a-z."""
    return ch in _ASCII_LETTERS


def encode_letter(ch: str) -> Optional[Tuple[int, bool]]:
    """
    Map one character onto the 0..25 ring.
    Returns (value, is_upper), or None for anything that isn't an ASCII letter.
    """
    if ch not in _ASCII_LETTERS:
        return None
    return ord(ch.upper()) - A_ORD, ch.isupper()


def decode_letter(value: int, upper: bool) -> str:
    letter = chr(A_ORD + value % 26)
    return letter if upper else letter.lower()


def norm_key_alpha(key: str) -> str:
    """Uppercase and keep only A-Z."""
    return "".join(ch for ch in key.upper() if is_letter(ch))


def shift_char(ch: str, shift: int) -> str:
    """Shift one A-Z character by 'shift' (can be negative)."""
    idx = (ord(ch) - A_ORD + shift) % 26
    return chr(A_ORD + idx)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    out = []
    for ch in text:
        enc = encode_letter(ch)
        if enc is None:
            out.append(ch)
            continue
        value, upper = enc
        out.append(decode_letter(value + shift, upper))
    return "".join(out)

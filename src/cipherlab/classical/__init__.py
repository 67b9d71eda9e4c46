from __future__ import annotations


def register_all() -> None:
    from .monoalphabetic import caesar  # noqa: F401
    from .polyalphabetic import vigenere  # noqa: F401

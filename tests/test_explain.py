"""Tests for worked examples and key-space figures."""

import pytest

from cipherlab.core.explain import (
    caesar_formula,
    key_space,
    letter_example,
    vigenere_formula,
    vigenere_steps,
)


class TestCaesarExplanation:
    def test_formula(self):
        assert caesar_formula(3) == "E(x) = (x + 3) mod 26"
        assert caesar_formula("3", decrypt=True) == "D(x) = (x - 3) mod 26"

    def test_letter_example_uses_first_letter(self):
        assert letter_example("  hello", 3) == "'H' → 'K'"
        assert letter_example("Khoor", 3, decrypt=True) == "'K' → 'H'"
        assert letter_example("xyz", 3) == "'X' → 'A'"

    def test_letter_example_without_letters(self):
        assert letter_example("123", 3) == ""


class TestVigenereExplanation:
    def test_formula(self):
        assert vigenere_formula().startswith("E(i) = (P(i) + K(i mod m)) mod 26")
        assert vigenere_formula(decrypt=True).startswith("D(i)")

    def test_steps(self):
        steps = vigenere_steps("attack at dawn", "LEMON")
        assert len(steps) == 10
        assert str(steps[0]) == "A + L: (0 + 11) mod 26 = 11 → L"
        assert "".join(s.result_letter for s in steps) == "LXFOPVEFRN"

    def test_decrypt_steps(self):
        steps = vigenere_steps("LXF", "LEMON", decrypt=True)
        assert steps[0].formula == "(11 - 11 + 26) mod 26 = 0"
        assert "".join(s.result_letter for s in steps) == "ATT"

    def test_limit_and_empty(self):
        assert len(vigenere_steps("abcdef", "K", limit=3)) == 3
        assert vigenere_steps("abc", "123") == []
        assert vigenere_steps("", "KEY") == []


class TestKeySpace:
    def test_values(self):
        assert key_space("caesar") == 25
        assert key_space("vigenere", "LEMON") == 26**5
        assert key_space("Vigenere", "1 2 3") == 0

    def test_unknown_cipher(self):
        with pytest.raises(ValueError):
            key_space("enigma", "ABC")

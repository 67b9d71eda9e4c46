"""Tests for the Caesar cipher and brute-force attack."""

import pytest

from cipherlab import brute_force_caesar, caesar_cipher
from cipherlab.classical.monoalphabetic.caesar import effective_shift
from cipherlab.config import AnalysisConfig


class TestCaesarCipher:
    @pytest.fixture
    def sample_plaintext(self):
        return "Hello, World! 123 zebra-ZEBRA"

    def test_known_vector(self):
        assert caesar_cipher("Hello World", 3, False) == "Khoor Zruog"
        assert caesar_cipher("Khoor Zruog", 3, True) == "Hello World"

    def test_roundtrip_any_integer_shift(self, sample_plaintext):
        for shift in range(-30, 60):
            ct = caesar_cipher(sample_plaintext, shift)
            assert caesar_cipher(ct, shift, decrypt=True) == sample_plaintext

    def test_shift_zero_and_26_are_identity(self, sample_plaintext):
        for shift in (0, 26, 52):
            assert caesar_cipher(sample_plaintext, shift) == sample_plaintext
            assert caesar_cipher(sample_plaintext, shift, decrypt=True) == sample_plaintext

    def test_non_letters_keep_position(self):
        assert caesar_cipher("a b.c", 1) == "b c.d"

    def test_string_shift_is_parsed(self):
        assert caesar_cipher("abc", "1") == "bcd"

    def test_unparseable_shift_raises(self):
        with pytest.raises(ValueError):
            caesar_cipher("abc", "three")

    def test_non_ascii_untouched(self):
        assert caesar_cipher("café", 1) == "dbgé"


class TestEffectiveShift:
    def test_encrypt(self):
        assert effective_shift(3) == 3
        assert effective_shift(29) == 3
        assert effective_shift(-1) == 25

    def test_decrypt(self):
        assert effective_shift(3, decrypt=True) == 23
        assert effective_shift(0, decrypt=True) == 0
        assert effective_shift(26, decrypt=True) == 0


class TestBruteForce:
    @pytest.fixture
    def plaintext(self):
        return "The quick brown fox jumps over the lazy dog and the cat was not here"

    def test_returns_all_nonzero_shifts(self, plaintext):
        results = brute_force_caesar(caesar_cipher(plaintext, 7))
        assert len(results) == 25
        assert sorted(r.shift for r in results) == list(range(1, 26))

    def test_correct_shift_ranks_first(self, plaintext):
        results = brute_force_caesar(caesar_cipher(plaintext, 7))
        assert results[0].shift == 7
        assert results[0].text == plaintext
        assert results[0].score == 23.5

    def test_sorted_descending(self, plaintext):
        scores = [r.score for r in brute_force_caesar(caesar_cipher(plaintext, 11))]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_shift_order(self):
        results = brute_force_caesar("123 !!")
        assert [r.shift for r in results] == list(range(1, 26))
        assert all(r.score == 0 for r in results)

    def test_deterministic(self, plaintext):
        ct = caesar_cipher(plaintext, 4)
        assert brute_force_caesar(ct) == brute_force_caesar(ct)

    def test_custom_word_list(self):
        cfg = AnalysisConfig(common_words=("ZEBRA",), letter_bonus=0.0)
        results = brute_force_caesar(caesar_cipher("zebra", 5), cfg)
        assert results[0].shift == 5
        assert results[0].score == 5.0

    def test_to_dict_shape(self):
        d = brute_force_caesar("Khoor")[0].to_dict()
        assert set(d) == {"shift", "text", "score"}

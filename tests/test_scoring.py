"""Tests for the readability heuristic and English comparison."""

import math

from cipherlab import frequency_analysis
from cipherlab.config import AnalysisConfig
from cipherlab.core.scoring import (
    ENGLISH_FREQUENCIES,
    chi_squared_english,
    compare_to_english,
    readability_score,
)


class TestReadabilityScore:
    def test_words_and_letter_bonus(self):
        # THE x2 (6) + AND (3) + 0.5 * (2 E + 3 T)
        assert readability_score("the cat and THE dog") == 11.5

    def test_whole_words_only(self):
        assert readability_score("there") == 1.5
        assert readability_score("other") == 1.0

    def test_punctuation_is_a_boundary(self):
        assert readability_score("the,the.the") == 9 + 0.5 * 6

    def test_empty(self):
        assert readability_score("") == 0.0

    def test_config_weights(self):
        cfg = AnalysisConfig(common_words=("DOG",), letter_bonus=1.0, bonus_letters="O")
        assert readability_score("dog dog", cfg) == 6 + 2


class TestEnglishComparison:
    def test_reference_table(self):
        assert len(ENGLISH_FREQUENCIES) == 26
        assert ENGLISH_FREQUENCIES["E"] == 12.7

    def test_compare_rows(self):
        rows = compare_to_english(frequency_analysis("EEEE"))
        assert len(rows) == 26
        e = next(r for r in rows if r["letter"] == "E")
        assert e["observed"] == 100.0
        assert e["difference"] == 87.3
        a = rows[0]
        assert a["letter"] == "A"
        assert a["observed"] == 0.0

    def test_chi_squared(self, english_text):
        assert math.isinf(chi_squared_english(""))
        assert chi_squared_english(english_text) < chi_squared_english("QXZJ" * 20)

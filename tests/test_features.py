"""Tests for frequency analysis and Index of Coincidence."""

import pytest

from cipherlab import frequency_analysis, index_of_coincidence
from cipherlab.core.features import analyze_text, ioc_scan


class TestFrequencyAnalysis:
    def test_counts_and_order(self):
        table = frequency_analysis("Hello, World!")
        assert table.total_letters == 10
        assert [e.letter for e in table.entries] == ["L", "O", "D", "E", "H", "R", "W"]
        assert table.entries[0].count == 3
        assert table.entries[0].frequency_percent == 30.0
        assert table.entries[1].frequency_percent == 20.0

    def test_ties_break_by_letter(self):
        # B is seen first, but equal counts are reported alphabetically
        table = frequency_analysis("bbaa")
        assert [e.letter for e in table.entries] == ["A", "B"]

    def test_counts_sum_to_total(self, english_text):
        table = frequency_analysis(english_text)
        assert sum(e.count for e in table.entries) == table.total_letters
        assert table.total_letters == sum(ch.isascii() and ch.isalpha() for ch in english_text)
        assert sum(e.frequency_percent for e in table.entries) == pytest.approx(100, abs=0.2)

    def test_ignores_non_ascii_letters(self):
        assert frequency_analysis("ıé a").total_letters == 1

    def test_empty(self):
        table = frequency_analysis("12 !?")
        assert table.total_letters == 0
        assert table.entries == ()

    def test_include_all(self):
        table = frequency_analysis("Hello, World!", include_all=True)
        assert len(table.entries) == 26
        # seven observed letters, then the zero rows alphabetically
        assert table.entries[7].letter == "A"
        assert table.entries[7].count == 0
        assert table.entries[-1].letter == "Z"

    def test_include_all_empty_text(self):
        table = frequency_analysis("", include_all=True)
        assert [e.letter for e in table.entries] == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        assert all(e.frequency_percent == 0.0 for e in table.entries)

    def test_to_dict(self):
        d = frequency_analysis("aab").to_dict()
        assert d["totalLetters"] == 3
        assert d["entries"][0] == {"letter": "A", "count": 2, "frequencyPercent": 66.67}


class TestIndexOfCoincidence:
    def test_guards(self):
        assert index_of_coincidence("") == 0
        assert index_of_coincidence("A") == 0
        assert index_of_coincidence("a !!") == 0

    def test_values(self):
        assert index_of_coincidence("AA") == 1.0
        assert index_of_coincidence("AB") == 0.0
        assert index_of_coincidence("a a b") == pytest.approx(1 / 3)

    def test_english_is_higher_than_flat(self, english_text):
        flat = "ABCDEFGHIJKLMNOPQRSTUVWXYZ" * 10
        assert index_of_coincidence(english_text) > 0.055
        assert index_of_coincidence(flat) < 0.04


class TestIocScan:
    def test_periodic_text(self):
        scan = ioc_scan("AB" * 10, max_len=4)
        assert scan[0] == (2, 1.0)

    def test_too_short(self):
        assert ioc_scan("a") == []


class TestAnalyzeText:
    def test_summary(self):
        info = analyze_text("AAbb!")
        assert info["length"] == 5
        assert info["letters"] == 4
        assert info["unique_letters"] == 2
        assert info["alpha_ratio"] == 0.8
        assert info["entropy"] == 1.0
        assert info["ioc"] == pytest.approx(1 / 3)

    def test_empty(self):
        assert analyze_text("")["length"] == 0

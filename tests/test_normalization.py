#!/usr/bin/env python3
"""
Test suite for bookshelf/normalization.py — symmetric title normalization
"""

import unicodedata

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bookshelf.normalization import normalize_title, normalize_title_list


SAMPLE_TITLES = [
    "",
    "1984",
    "Dune",
    "Hitchhiker's Guide to the Galaxy",
    "The Lord of the Rings",
    "  D.u.n.e  ",
    "Dr. Strangelove: Or How I Learned to Stop Worrying",
    "Tab\tand\nnewline",
    "«Guillemets» — em dash",
    "À bout de souffle",
    "$100 + Change",
    "!!!",
    "\u0130stanbul Memories",
]


class TestPunctuationRemoval:
    """Punctuation and whitespace are dropped, nothing else"""

    def test_apostrophe(self):
        assert normalize_title("Hitchhiker's Guide") == "hitchhikersguide"

    def test_periods(self):
        assert normalize_title("D.u.n.e") == "dune"

    def test_colon_and_spaces(self):
        assert normalize_title("Alien: Resurrection") == "alienresurrection"

    def test_all_whitespace_kinds(self):
        assert normalize_title("a b\tc\nd e") == "abcde"

    def test_unicode_punctuation(self):
        assert normalize_title("«Dune» — Part Two") == "duneparttwo"

    def test_punctuation_only(self):
        assert normalize_title("?!...,") == ""

    def test_symbols_kept(self):
        """Symbols are not punctuation: '$' and '+' survive"""
        assert normalize_title("$100 + Change") == "$100+change"

    def test_digits_kept(self):
        assert normalize_title("1984") == "1984"


class TestCaseFolding:

    def test_uppercase(self):
        assert normalize_title("DUNE") == "dune"

    def test_mixed_case(self):
        assert normalize_title("HiTcHhIkErS") == "hitchhikers"

    def test_accents_not_stripped(self):
        """Only case changes; diacritics stay"""
        assert normalize_title("À bout") == "àbout"

    def test_dotted_capital_i_is_one_character(self):
        """'İ' (U+0130) lowercases to plain 'i', not 'i' + combining dot"""
        assert normalize_title("İstanbul") == "istanbul"
        assert normalize_title("İstanbul") == normalize_title("istanbul")

    @pytest.mark.parametrize("title", ["İ", "DUNE", "ǅ", "À bout", "ΣΟΦΙΑ"])
    def test_one_key_character_per_kept_character(self, title):
        assert len(normalize_title(title)) == len(title.replace(" ", ""))


class TestNormalizationProperties:
    """Invariants that hold for every input"""

    def test_empty(self):
        assert normalize_title("") == ""

    @pytest.mark.parametrize("title", SAMPLE_TITLES)
    def test_no_punctuation_or_whitespace(self, title):
        result = normalize_title(title)
        for char in result:
            assert not char.isspace()
            assert not unicodedata.category(char).startswith('P')

    @pytest.mark.parametrize("title", SAMPLE_TITLES)
    def test_lowercase(self, title):
        result = normalize_title(title)
        assert result == result.lower()

    @pytest.mark.parametrize("title", SAMPLE_TITLES)
    def test_idempotent(self, title):
        once = normalize_title(title)
        assert normalize_title(once) == once


class TestNormalizeTitleList:

    def test_preserves_order(self):
        assert normalize_title_list(["Dune", "1984", "The Hobbit"]) == ["dune", "1984", "thehobbit"]

    def test_empty_list(self):
        assert normalize_title_list([]) == []

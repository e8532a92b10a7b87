#!/usr/bin/env python3
"""
Title keys for the book catalog

BookCatalog compares titles only through normalize_title(): add() uses the
key to reject duplicates and find() uses it for substring matching. A title
and a query that differ only in case, spacing or punctuation therefore
produce the same key.
"""

import unicodedata
from typing import List

from bookshelf.constants import PUNCTUATION_CATEGORY_PREFIX


def _is_ignorable(char: str) -> bool:
    """True for punctuation and whitespace, which never take part in matching"""
    if char.isspace():
        return True
    return unicodedata.category(char).startswith(PUNCTUATION_CATEGORY_PREFIX)


def _lower_char(char: str) -> str:
    """Single-character lowercase. str.lower() expands only U+0130 (İ), to 'i' + U+0307"""
    return char.lower()[0]


def normalize_title(title: str) -> str:
    """
    Normalize title into a comparison key

    Normalization steps, applied character by character in order:
    1. Drop punctuation (any Unicode 'P*' category)
    2. Drop whitespace
    3. Lowercase everything else, one character in, one character out

    Symbols such as '$' or '+' and digits are kept. Empty input gives an
    empty key; the function never raises.

    Args:
        title: Raw title string (may be empty)

    Returns:
        Normalized key

    Examples:
        >>> normalize_title("Hitchhiker's Guide to the Galaxy")
        'hitchhikersguidetothegalaxy'

        >>> normalize_title("D.u.n.e")
        'dune'

        >>> normalize_title("")
        ''
    """
    return ''.join(_lower_char(c) for c in title if not _is_ignorable(c))


def normalize_title_list(titles: List[str]) -> List[str]:
    """
    Normalize a list of titles

    Args:
        titles: List of raw title strings

    Returns:
        List of normalized keys, in the same order
    """
    return [normalize_title(title) for title in titles]

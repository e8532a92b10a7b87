#!/usr/bin/env python3
"""
Constants for the book catalog

Seed titles for find_book.py, the YAML key they are read from, and the
Unicode category prefix normalize_title() drops as punctuation.
"""

# Titles the CLI seeds its catalog with when no config file is given
DEFAULT_TITLES = [
    '1984',
    'Dune',
    "Hitchhiker's Guide to the Galaxy",
    'The Lord of the Rings',
]

# Key holding the title list in a YAML seed config
CONFIG_BOOKS_KEY = 'books'

# Unicode general category prefix for punctuation (Pc, Pd, Ps, Pe, Pi, Pf, Po)
PUNCTUATION_CATEGORY_PREFIX = 'P'

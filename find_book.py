#!/usr/bin/env python3
"""
find_book.py — Look up books in a small seeded catalog

Seeds an in-memory catalog, then runs each positional argument as a
title query, in order. Matching ignores case, punctuation and whitespace,
and a query only has to be part of a title ("hitchhikers" finds
"Hitchhiker's Guide to the Galaxy").

Exit codes:
  0  every query found a book (or no queries were given)
  1  a query found nothing (remaining queries are skipped),
     a seed title was empty, or the config file could not be used

Usage:
  python find_book.py dune                        # search the default catalog
  python find_book.py dune "lord of the rings"    # several queries
  python find_book.py --config books.yaml dune    # seed titles from YAML
  python find_book.py -v dune                     # debug logging
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

import yaml

from bookshelf.catalog import (
    Book, BookCatalog, BookExistsError, BookNotFoundError, InvalidBookError,
)
from bookshelf.constants import CONFIG_BOOKS_KEY, DEFAULT_TITLES

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Seed config file is missing or malformed"""


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file"""
    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_seed_titles(config_path: Optional[Path]) -> List[str]:
    """
    Return the titles to seed the catalog with.

    Without a config path the built-in DEFAULT_TITLES are used. A config
    file must be a mapping with a 'books' list; null entries become empty
    titles so they fail validation on add.
    """
    if config_path is None:
        return list(DEFAULT_TITLES)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    if not config_path.is_file():
        raise ConfigError(f"Not a file: {config_path}")

    try:
        config = load_config(config_path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if not isinstance(config, dict) or not isinstance(config.get(CONFIG_BOOKS_KEY), list):
        raise ConfigError(f"{config_path} must contain a '{CONFIG_BOOKS_KEY}' list")

    return ['' if t is None else str(t) for t in config[CONFIG_BOOKS_KEY]]


def build_catalog(titles: List[str]) -> BookCatalog:
    """
    Add each title to a fresh catalog.

    Duplicates are logged and skipped. An empty title raises
    InvalidBookError to the caller.
    """
    catalog = BookCatalog()

    for title in titles:
        try:
            catalog.add(Book(title))
        except BookExistsError as e:
            # Duplicate seed: warn and carry on
            logger.warning(f"Book already exists! {e}")
            continue

    logger.debug(f"Seeded catalog with {len(catalog)} books")
    return catalog


def run_queries(catalog: BookCatalog, queries: List[str]) -> int:
    """
    Print the match for each query, stopping at the first miss.

    Returns 0 if every query matched, 1 otherwise. Errors other than
    BookNotFoundError propagate.
    """
    for query in queries:
        try:
            book = catalog.find(query)
        except BookNotFoundError as e:
            print(f"Book not found! {e}")
            return 1

        print(f"Found {book}!")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Search a small in-memory book catalog by title',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        'queries',
        nargs='*',
        metavar='QUERY',
        help='Title (or part of one) to search for',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help="YAML file with a 'books' list to seed the catalog (default: built-in titles)",
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging',
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        titles = load_seed_titles(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    try:
        catalog = build_catalog(titles)
    except InvalidBookError as e:
        logger.error(f"Invalid book! {e}")
        return 1

    return run_queries(catalog, args.queries)


if __name__ == '__main__':
    sys.exit(main())

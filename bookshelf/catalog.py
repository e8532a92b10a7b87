#!/usr/bin/env python3
"""
bookshelf/catalog.py — In-memory book catalog

Holds an ordered list of books and answers title queries against it.
Insertion order is the reporting order: when a query matches several
books, the one added first wins.

Both add() and find() go through normalize_title() from
bookshelf.normalization, so duplicate detection and searching agree on
what counts as "the same title".

Errors are raised, never handled here. Callers decide which kinds are
fatal (see find_book.py).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from bookshelf.normalization import normalize_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Book:
    """A book in the catalog. The title is its only identity."""
    title: str

    def __str__(self) -> str:
        return self.title


class CatalogError(Exception):
    """Base class for every error raised by BookCatalog"""


class InvalidBookError(CatalogError):
    """Book cannot be added because its title is empty"""

    def __init__(self, title: str):
        self.title = title
        super().__init__('invalid book: title is empty')


class BookExistsError(CatalogError):
    """A book with the same normalized title is already in the catalog"""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f'adding {title}: book already exists')


class BookNotFoundError(CatalogError, LookupError):
    """No book title contains the normalized query"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'finding {query}: book not found in library')


class BookCatalog:
    """Ordered collection of books with normalized-title search"""

    def __init__(self):
        self._books: List[Book] = []

    @classmethod
    def from_titles(cls, titles: Iterable[str]) -> 'BookCatalog':
        """
        Build a catalog by adding each title in turn.

        Raises the first InvalidBookError / BookExistsError encountered.
        """
        catalog = cls()
        for title in titles:
            catalog.add(Book(title))
        return catalog

    def add(self, book: Book) -> None:
        """
        Append book to the catalog.

        Raises:
            InvalidBookError: title is empty (raw check, before normalization)
            BookExistsError: a stored title normalizes to the same key
        """
        if book.title == '':
            raise InvalidBookError(book.title)

        key = normalize_title(book.title)
        for existing in self._books:
            if normalize_title(existing.title) == key:
                logger.debug(f"Duplicate: '{book.title}' matches stored '{existing.title}'")
                raise BookExistsError(book.title)

        self._books.append(book)
        logger.debug(f"Added: '{book.title}' → normalized: '{key}'")

    def find(self, query: str) -> Book:
        """
        Return the first book whose normalized title contains the normalized query.

        Substring match, not equality: an empty or punctuation-only query
        matches the first book in the catalog.

        Raises:
            BookNotFoundError: nothing matched (always the case for an empty catalog)
        """
        normalized = normalize_title(query)

        for book in self._books:
            if normalized in normalize_title(book.title):
                logger.debug(f"Lookup hit: '{query}' → normalized: '{normalized}' → '{book.title}'")
                return book

        logger.debug(f"Lookup miss: '{query}' → normalized: '{normalized}'")
        raise BookNotFoundError(query)

    def __contains__(self, query: str) -> bool:
        try:
            self.find(query)
        except BookNotFoundError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(tuple(self._books))

    @property
    def books(self) -> Tuple[Book, ...]:
        """Snapshot of the stored books in insertion order"""
        return tuple(self._books)

    def titles(self) -> List[str]:
        return [book.title for book in self._books]

    def get_stats(self) -> Dict:
        """Get catalog statistics"""
        return {
            'total_books': len(self._books),
            'normalized_keys': len({normalize_title(b.title) for b in self._books}),
        }

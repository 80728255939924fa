"""Models package for QuantumBooks.

This module exports the Book entity and its variants.
"""

from quantumbooks.models.book import (
    Book,
    BookKind,
    DigitalBook,
    PhysicalBook,
    ShowcaseBook,
)

__all__ = [
    "Book",
    "BookKind",
    "DigitalBook",
    "PhysicalBook",
    "ShowcaseBook",
]

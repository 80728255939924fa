"""Bookstore service for managing the in-memory inventory.

This service owns the ISBN-keyed inventory and orchestrates the three
store operations: registering books, clearing outdated stock, and
processing purchases that hand off to the book's fulfillment channel.
"""

from __future__ import annotations

import structlog

from quantumbooks.core.clock import Clock
from quantumbooks.core.exceptions import (
    BookNotFoundError,
    InvalidQuantityError,
    NotForSaleError,
)
from quantumbooks.core.output import OutputSink
from quantumbooks.models.book import Book

logger = structlog.get_logger(__name__)


class Bookstore:
    """In-memory bookstore inventory.

    At most one book is held per ISBN; registering an ISBN again replaces
    the earlier entry. The reference year used for age checks is fixed when
    the store is created.

    Usage:
        ```python
        store = Bookstore(sink, current_year=2024)
        store.register_book(book)
        total = store.process_purchase("P001", 2, "a@b.com", "Cairo")
        ```
    """

    def __init__(
        self,
        sink: OutputSink,
        *,
        current_year: int | None = None,
        clock: Clock | None = None,
        store_name: str = "Quantum Book Store",
        currency: str = "EGP",
    ) -> None:
        """Initialize the store.

        Args:
            sink: Where purchase receipts are written
            current_year: Fixed reference year for age checks
            clock: Queried once for the year when current_year is not given
            store_name: Prefix for receipt lines
            currency: Currency code printed on receipts

        Raises:
            ValueError: If neither current_year nor clock is supplied
        """
        if current_year is None:
            if clock is None:
                raise ValueError("Bookstore needs either current_year or clock")
            current_year = clock.current_year()

        self.sink = sink
        self.store_name = store_name
        self.currency = currency
        self._current_year = current_year
        self._inventory: dict[str, Book] = {}

    @property
    def current_year(self) -> int:
        return self._current_year

    # -------------------------------------------------------------------------
    # Inventory
    # -------------------------------------------------------------------------

    def register_book(self, book: Book) -> None:
        """Add a book, replacing any existing entry with the same ISBN."""
        replaced = book.isbn in self._inventory
        self._inventory[book.isbn] = book

        logger.info(
            "book_registered",
            isbn=book.isbn,
            title=book.title,
            kind=book.kind.value,
            replaced=replaced,
        )

    def find_by_isbn(self, isbn: str) -> Book | None:
        """Find a book by ISBN.

        Returns:
            Book if registered, None otherwise
        """
        return self._inventory.get(isbn)

    def get_book(self, isbn: str) -> Book:
        """Get a registered book.

        Raises:
            BookNotFoundError: If the ISBN is not registered
        """
        book = self._inventory.get(isbn)
        if book is None:
            raise BookNotFoundError(isbn=isbn)
        return book

    def books(self) -> list[Book]:
        """Snapshot of every registered book."""
        return list(self._inventory.values())

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._inventory

    def clear_old_books(self, max_age: int) -> list[Book]:
        """Remove every book older than ``max_age`` years.

        Args:
            max_age: Largest age, in years, a book may have and stay listed

        Returns:
            The removed books. Callers should not rely on their order.
        """
        removed = [
            book
            for book in self._inventory.values()
            if book.is_outdated(max_age, self._current_year)
        ]
        for book in removed:
            del self._inventory[book.isbn]

        logger.info(
            "outdated_books_cleared",
            max_age=max_age,
            current_year=self._current_year,
            removed=[book.isbn for book in removed],
        )
        return removed

    # -------------------------------------------------------------------------
    # Purchases
    # -------------------------------------------------------------------------

    def process_purchase(
        self,
        isbn: str,
        quantity: int,
        email: str,
        address: str,
    ) -> float:
        """Sell ``quantity`` copies of a book and hand them to fulfillment.

        Stock is decreased before delivery is attempted and is not restored
        if delivery raises.

        Args:
            isbn: ISBN of the book to buy
            quantity: Number of copies (must be positive)
            email: Buyer email, used by digital delivery
            address: Buyer address, used by shipping

        Returns:
            Amount paid (quantity * unit price)

        Raises:
            BookNotFoundError: If the ISBN is not registered
            NotForSaleError: If the book is a showcase copy
            InvalidQuantityError: If quantity is not positive
            InsufficientStockError: If not enough copies are in stock
        """
        book = self.get_book(isbn)

        if not book.is_for_sale:
            raise NotForSaleError(isbn=isbn)

        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        book.decrease_stock(quantity)
        total = quantity * book.unit_price

        book.fulfill_delivery(email, address)

        self.sink.emit(
            f"{self.store_name}: Paid {total:.0f} {self.currency} for {book.kind.label}"
        )
        logger.info(
            "purchase_completed",
            isbn=isbn,
            quantity=quantity,
            total=total,
            kind=book.kind.value,
            remaining_stock=book.quantity_in_stock,
        )
        return total

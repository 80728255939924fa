"""Book model - a catalogue entry held in the store inventory.

A Book has fixed identity and pricing fields and a mutable stock count.
Three variants differ only in how a purchased copy reaches the buyer:

- PhysicalBook: shipped to a postal address
- DigitalBook: delivered to an email address
- ShowcaseBook: a display copy that cannot be sold
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from quantumbooks.core.exceptions import (
    InsufficientStockError,
    InvalidBookDataError,
    InvalidQuantityError,
    NotForSaleError,
)

if TYPE_CHECKING:
    from quantumbooks.services.fulfillment import MailService, ShippingService


class BookKind(str, Enum):
    """How a book is fulfilled. Drives display labels and sellability."""

    PHYSICAL = "physical"
    DIGITAL = "digital"
    SHOWCASE = "showcase"

    @property
    def label(self) -> str:
        """Human-readable label used on receipts."""
        return f"{self.value} book"


def _require_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidBookDataError(
            field, value, message=f"Book {field} cannot be blank"
        )
    return value


def _require_number(field: str, value: Any, kind: type = numbers.Real) -> Any:
    # bool is an int subclass but never a valid count or price
    if isinstance(value, bool) or not isinstance(value, kind) or math.isnan(value):
        raise InvalidBookDataError(
            field, value, message=f"Book {field} must be a number"
        )
    return value


def _require_non_negative(field: str, value: Any, kind: type = numbers.Real) -> Any:
    if _require_number(field, value, kind) < 0:
        raise InvalidBookDataError(
            field, value, message=f"Book {field} cannot be negative"
        )
    return value


class Book(ABC):
    """Abstract catalogue entry.

    Attributes:
        isbn: Identity key in the inventory (non-blank)
        title: Book title (non-blank)
        publication_year: Year the book was published
        unit_price: Price of one copy (non-negative)
        quantity_in_stock: Copies available (non-negative, mutable)
        author: Author name (non-blank)
    """

    kind: BookKind

    def __init__(
        self,
        isbn: str,
        title: str,
        publication_year: int,
        unit_price: float,
        quantity_in_stock: int,
        author: str,
    ) -> None:
        self._isbn = _require_text("isbn", isbn)
        self._title = _require_text("title", title)
        self._author = _require_text("author", author)
        self._unit_price = _require_non_negative("unit_price", unit_price)
        self._quantity_in_stock = _require_non_negative(
            "quantity_in_stock", quantity_in_stock, numbers.Integral
        )
        self._publication_year = _require_number(
            "publication_year", publication_year, numbers.Integral
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @property
    def unit_price(self) -> float:
        return self._unit_price

    @property
    def quantity_in_stock(self) -> int:
        return self._quantity_in_stock

    @property
    def is_for_sale(self) -> bool:
        """Whether the store may sell copies of this book."""
        return self.kind is not BookKind.SHOWCASE

    # -------------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------------

    def decrease_stock(self, qty: int) -> None:
        """Remove ``qty`` copies from stock.

        Raises:
            InvalidQuantityError: If qty is negative
            InsufficientStockError: If qty exceeds the copies in stock.
                Stock is left unchanged.
        """
        if qty < 0:
            raise InvalidQuantityError(qty)
        if qty > self._quantity_in_stock:
            raise InsufficientStockError(
                isbn=self._isbn,
                requested=qty,
                available=self._quantity_in_stock,
            )
        self._quantity_in_stock -= qty

    def is_outdated(self, max_age: int, current_year: int) -> bool:
        """Return True if the book is strictly older than ``max_age`` years."""
        return (current_year - self._publication_year) > max_age

    @abstractmethod
    def fulfill_delivery(self, email: str, address: str) -> None:
        """Deliver a purchased copy to the buyer."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "isbn": self._isbn,
            "title": self._title,
            "author": self._author,
            "publication_year": self._publication_year,
            "unit_price": self._unit_price,
            "quantity_in_stock": self._quantity_in_stock,
            "kind": self.kind.value,
        }

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(isbn='{self._isbn}', title='{self._title}', "
            f"stock={self._quantity_in_stock})>"
        )


class PhysicalBook(Book):
    """A printed book shipped to the buyer's address."""

    kind = BookKind.PHYSICAL

    def __init__(
        self,
        isbn: str,
        title: str,
        publication_year: int,
        unit_price: float,
        quantity_in_stock: int,
        author: str,
        shipping: ShippingService,
    ) -> None:
        super().__init__(
            isbn, title, publication_year, unit_price, quantity_in_stock, author
        )
        self.shipping = shipping

    def fulfill_delivery(self, email: str, address: str) -> None:
        self.shipping.dispatch_to(self, address)


class DigitalBook(Book):
    """An ebook sent to the buyer's email address."""

    kind = BookKind.DIGITAL

    def __init__(
        self,
        isbn: str,
        title: str,
        publication_year: int,
        unit_price: float,
        quantity_in_stock: int,
        author: str,
        mail: MailService,
    ) -> None:
        super().__init__(
            isbn, title, publication_year, unit_price, quantity_in_stock, author
        )
        self.mail = mail

    def fulfill_delivery(self, email: str, address: str) -> None:
        self.mail.send_to_mail(self, email)


class ShowcaseBook(Book):
    """A display copy listed in the catalogue but never sold."""

    kind = BookKind.SHOWCASE

    def fulfill_delivery(self, email: str, address: str) -> None:
        raise NotForSaleError(isbn=self.isbn)

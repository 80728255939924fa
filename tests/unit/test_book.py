"""Tests for the Book entity and its variants.

Covers constructor validation, stock arithmetic, the outdated predicate,
and per-variant fulfillment dispatch.
"""

import math
from unittest.mock import MagicMock

import pytest

from quantumbooks.core.exceptions import (
    InsufficientStockError,
    InvalidBookDataError,
    InvalidQuantityError,
    NotForSaleError,
)
from quantumbooks.models.book import (
    BookKind,
    DigitalBook,
    PhysicalBook,
    ShowcaseBook,
)

# =============================================================================
# Construction Tests
# =============================================================================


class TestBookConstruction:
    """Tests for Book constructor validation and accessors."""

    def test_accessors_return_supplied_values(self, mock_shipping: MagicMock) -> None:
        """Every accessor echoes the constructor argument."""
        book = PhysicalBook(
            "9780618640157",
            "The Hobbit",
            1937,
            19.5,
            7,
            "J. R. R. Tolkien",
            mock_shipping,
        )

        assert book.isbn == "9780618640157"
        assert book.title == "The Hobbit"
        assert book.publication_year == 1937
        assert book.unit_price == 19.5
        assert book.quantity_in_stock == 7
        assert book.author == "J. R. R. Tolkien"
        assert book.shipping is mock_shipping

    def test_zero_price_and_stock_are_valid(self) -> None:
        """Zero is non-negative and therefore accepted."""
        book = ShowcaseBook("D001", "Demo", 2020, 0.0, 0, "Unknown")

        assert book.unit_price == 0.0
        assert book.quantity_in_stock == 0

    @pytest.mark.parametrize(
        ("field", "kwargs"),
        [
            ("isbn", {"isbn": ""}),
            ("isbn", {"isbn": "   "}),
            ("isbn", {"isbn": None}),
            ("title", {"title": ""}),
            ("title", {"title": "\t"}),
            ("author", {"author": " "}),
            ("unit_price", {"unit_price": -0.01}),
            ("quantity_in_stock", {"quantity_in_stock": -1}),
            ("unit_price", {"unit_price": math.nan}),
            ("unit_price", {"unit_price": "12"}),
            ("unit_price", {"unit_price": None}),
            ("unit_price", {"unit_price": True}),
            ("quantity_in_stock", {"quantity_in_stock": 1.5}),
            ("quantity_in_stock", {"quantity_in_stock": "3"}),
            ("publication_year", {"publication_year": None}),
            ("publication_year", {"publication_year": "2020"}),
            ("publication_year", {"publication_year": 2020.0}),
        ],
    )
    def test_invalid_field_is_named(self, field: str, kwargs: dict) -> None:
        """Blank text, non-numbers, NaN or negatives raise an error naming the field."""
        values = {
            "isbn": "X001",
            "title": "Title",
            "publication_year": 2000,
            "unit_price": 10.0,
            "quantity_in_stock": 1,
            "author": "Author",
            **kwargs,
        }

        with pytest.raises(InvalidBookDataError) as exc_info:
            ShowcaseBook(**values)

        assert exc_info.value.field == field
        assert exc_info.value.details["field"] == field
        assert exc_info.value.code == "INVALID_BOOK_DATA"

    def test_identity_fields_are_read_only(self, physical_book: PhysicalBook) -> None:
        """Identity and pricing fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            physical_book.isbn = "OTHER"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            physical_book.quantity_in_stock = 99  # type: ignore[misc]

    def test_kind_discriminant(
        self,
        physical_book: PhysicalBook,
        digital_book: DigitalBook,
        showcase_book: ShowcaseBook,
    ) -> None:
        """Each variant reports its own kind and sellability."""
        assert physical_book.kind is BookKind.PHYSICAL
        assert digital_book.kind is BookKind.DIGITAL
        assert showcase_book.kind is BookKind.SHOWCASE
        assert physical_book.is_for_sale
        assert digital_book.is_for_sale
        assert not showcase_book.is_for_sale

    def test_to_dict(self, digital_book: DigitalBook) -> None:
        """Snapshot includes every field plus the kind."""
        assert digital_book.to_dict() == {
            "isbn": "E001",
            "title": "Ebook",
            "author": "Mai",
            "publication_year": 2023,
            "unit_price": 150.0,
            "quantity_in_stock": 2,
            "kind": "digital",
        }


# =============================================================================
# Stock Tests
# =============================================================================


class TestDecreaseStock:
    """Tests for decrease_stock."""

    @pytest.mark.parametrize("qty", [0, 1, 2, 3])
    def test_subtracts_quantity(self, physical_book: PhysicalBook, qty: int) -> None:
        """New stock equals old stock minus the quantity."""
        physical_book.decrease_stock(qty)

        assert physical_book.quantity_in_stock == 3 - qty

    def test_too_many_leaves_stock_unchanged(self, physical_book: PhysicalBook) -> None:
        """Asking for more than available fails without mutation."""
        with pytest.raises(InsufficientStockError) as exc_info:
            physical_book.decrease_stock(4)

        assert physical_book.quantity_in_stock == 3
        assert exc_info.value.details == {
            "isbn": "P001",
            "requested": 4,
            "available": 3,
        }

    def test_negative_quantity_rejected(self, physical_book: PhysicalBook) -> None:
        """A negative decrease would grow the stock, so it is refused."""
        with pytest.raises(InvalidQuantityError):
            physical_book.decrease_stock(-1)

        assert physical_book.quantity_in_stock == 3


# =============================================================================
# Outdated Predicate Tests
# =============================================================================


class TestIsOutdated:
    """Tests for is_outdated."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2020, True),  # age 4
            (2021, False),  # age 3, boundary
            (2022, False),  # age 2
            (2024, False),  # age 0
        ],
    )
    def test_strictly_older_than_max_age(self, year: int, expected: bool) -> None:
        """Outdated iff current_year - publication_year > max_age."""
        book = ShowcaseBook("D001", "Demo", year, 0.0, 1, "Unknown")

        assert book.is_outdated(3, 2024) is expected


# =============================================================================
# Fulfillment Tests
# =============================================================================


class TestFulfillDelivery:
    """Tests for variant-specific delivery dispatch."""

    def test_physical_ships_to_address(
        self, physical_book: PhysicalBook, mock_shipping: MagicMock
    ) -> None:
        """Physical books go to the shipping collaborator with the address."""
        physical_book.fulfill_delivery("reader@example.com", "Madinaty")

        mock_shipping.dispatch_to.assert_called_once_with(physical_book, "Madinaty")

    def test_digital_mails_to_email(
        self, digital_book: DigitalBook, mock_mail: MagicMock
    ) -> None:
        """Digital books go to the mail collaborator with the email."""
        digital_book.fulfill_delivery("reader@example.com", "Madinaty")

        mock_mail.send_to_mail.assert_called_once_with(
            digital_book, "reader@example.com"
        )

    def test_showcase_always_refuses(self, showcase_book: ShowcaseBook) -> None:
        """Showcase books cannot be delivered."""
        with pytest.raises(NotForSaleError) as exc_info:
            showcase_book.fulfill_delivery("reader@example.com", "Madinaty")

        assert exc_info.value.details == {"isbn": "D001"}

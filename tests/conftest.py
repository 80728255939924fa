"""Pytest configuration and fixtures for QuantumBooks tests.

This module provides reusable fixtures for:
- Settings overrides
- Recording output sink
- Fake fulfillment collaborators
- A store preloaded with one book of each kind
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from quantumbooks.config import Settings, get_settings
from quantumbooks.core.logging import configure_logging
from quantumbooks.core.output import MemorySink
from quantumbooks.models.book import DigitalBook, PhysicalBook, ShowcaseBook
from quantumbooks.services.bookstore import Bookstore
from quantumbooks.services.fulfillment import MailService, ShippingService

# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Create test-specific settings with a fixed reference year."""
    return Settings(
        log_level="DEBUG",  # type: ignore[arg-type]
        log_format="console",  # type: ignore[arg-type]
        store_name="Quantum Book Store",
        currency="EGP",
        max_book_age=3,
        current_year=2024,
    )


@pytest.fixture(autouse=True)
def _logging() -> None:
    """Route structlog through stdlib logging on the current stderr."""
    configure_logging(Settings(log_level="DEBUG"))  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Make sure env overrides in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def sink() -> MemorySink:
    """Create an in-memory output sink."""
    return MemorySink()


@pytest.fixture
def mock_shipping() -> MagicMock:
    """Create a fake shipping service."""
    return MagicMock(spec=ShippingService)


@pytest.fixture
def mock_mail() -> MagicMock:
    """Create a fake mail service."""
    return MagicMock(spec=MailService)


# =============================================================================
# Book Fixtures
# =============================================================================


@pytest.fixture
def physical_book(mock_shipping: MagicMock) -> PhysicalBook:
    """Paper copy priced at 120.0 with three in stock."""
    return PhysicalBook("P001", "paperbook", 2008, 120.0, 3, "Khaled", mock_shipping)


@pytest.fixture
def digital_book(mock_mail: MagicMock) -> DigitalBook:
    """Ebook priced at 150.0 with two in stock."""
    return DigitalBook("E001", "Ebook", 2023, 150.0, 2, "Mai", mock_mail)


@pytest.fixture
def showcase_book() -> ShowcaseBook:
    """Display copy that is never sold."""
    return ShowcaseBook("D001", "Demo", 2020, 0.0, 1, "Unknown")


@pytest.fixture
def store(
    sink: MemorySink,
    physical_book: PhysicalBook,
    digital_book: DigitalBook,
    showcase_book: ShowcaseBook,
) -> Bookstore:
    """Create a store at year 2024 holding one book of each kind."""
    bookstore = Bookstore(sink, current_year=2024)
    bookstore.register_book(physical_book)
    bookstore.register_book(digital_book)
    bookstore.register_book(showcase_book)
    return bookstore

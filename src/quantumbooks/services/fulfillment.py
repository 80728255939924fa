"""Fulfillment collaborators for purchased books.

Two independent capabilities:
- ShippingService: send a physical copy to a postal address
- MailService: send a digital copy to an email address

Books depend only on these protocols, so tests can pass fakes and the
notification mechanism can change without touching the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

from quantumbooks.core.output import OutputSink

if TYPE_CHECKING:
    from quantumbooks.models.book import Book

logger = structlog.get_logger(__name__)


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------


class ShippingService(Protocol):
    """Can ship a book to a physical address."""

    def dispatch_to(self, book: Book, address: str) -> None: ...


class MailService(Protocol):
    """Can deliver a book to an email address."""

    def send_to_mail(self, book: Book, email: str) -> None: ...


# -----------------------------------------------------------------------------
# Console-backed implementations
# -----------------------------------------------------------------------------


class ConsoleShippingService:
    """Announces shipments on an output sink.

    Usage:
        ```python
        shipping = ConsoleShippingService(ConsoleSink(), store_name="Quantum Book Store")
        shipping.dispatch_to(book, "Madinaty")
        ```
    """

    def __init__(self, sink: OutputSink, store_name: str) -> None:
        """Initialize the service.

        Args:
            sink: Where shipping notices are written
            store_name: Prefix for every notice
        """
        self.sink = sink
        self.store_name = store_name

    def dispatch_to(self, book: Book, address: str) -> None:
        self.sink.emit(
            f"{self.store_name}: Shipping '{book.title.lower()}' to address: {address}"
        )
        logger.info("shipment_dispatched", isbn=book.isbn, address=address)


class ConsoleMailService:
    """Announces email deliveries on an output sink."""

    def __init__(self, sink: OutputSink, store_name: str) -> None:
        self.sink = sink
        self.store_name = store_name

    def send_to_mail(self, book: Book, email: str) -> None:
        self.sink.emit(f"{self.store_name}: Sending '{book.title}' to email: {email}")
        logger.info("mail_dispatched", isbn=book.isbn, email=email)

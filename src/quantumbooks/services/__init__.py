"""Services package for QuantumBooks.

This module exports service classes for business logic.
"""

from quantumbooks.services.bookstore import Bookstore
from quantumbooks.services.fulfillment import (
    ConsoleMailService,
    ConsoleShippingService,
    MailService,
    ShippingService,
)

__all__ = [
    # Inventory
    "Bookstore",
    # Fulfillment
    "ConsoleMailService",
    "ConsoleShippingService",
    "MailService",
    "ShippingService",
]

"""Custom exception hierarchy for QuantumBooks.

This module defines a consistent exception hierarchy that enables:
- Machine-readable error codes for every failure
- Structured details for logging and CLI output
- A single base class for callers that handle all store errors

Usage:
    from quantumbooks.core.exceptions import BookNotFoundError

    raise BookNotFoundError(isbn="P001")
"""

from typing import Any


class QuantumBooksError(Exception):
    """Base exception for all QuantumBooks errors.

    All custom exceptions should inherit from this class to enable
    consistent error handling and reporting.

    Attributes:
        code: Machine-readable error code (e.g., "BOOK_NOT_FOUND")
        message: Human-readable error message
        details: Additional error details (optional)
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Override default message
            code: Override default error code
            details: Additional error details
        """
        if message:
            self.message = message
        if code:
            self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured error payload."""
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error}


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(QuantumBooksError):
    """Raised when input validation fails."""

    code: str = "VALIDATION_ERROR"
    message: str = "Validation error"

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with optional field information."""
        if details is None:
            details = {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message=message, details=details if details else None)


class InvalidBookDataError(ValidationError):
    """Raised when a book is constructed with blank or negative fields."""

    code: str = "INVALID_BOOK_DATA"
    message: str = "Invalid book data"

    def __init__(
        self,
        field: str,
        value: Any = None,
        message: str | None = None,
    ) -> None:
        """Initialize with the offending field.

        Args:
            field: Name of the field that failed validation
            value: The rejected value
            message: Override default message
        """
        if not message:
            message = f"Invalid value for book field '{field}'"
        super().__init__(message=message, field=field, details={"value": value})


class InvalidQuantityError(ValidationError):
    """Raised when a purchase or stock change uses a non-positive quantity."""

    code: str = "INVALID_QUANTITY"
    message: str = "Quantity must be positive"

    def __init__(self, quantity: int, message: str | None = None) -> None:
        super().__init__(
            message=message or f"Quantity must be positive, got {quantity}",
            field="quantity",
            details={"quantity": quantity},
        )


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(QuantumBooksError):
    """Base class for resource not found errors."""

    code: str = "NOT_FOUND"
    message: str = "Resource not found"


class BookNotFoundError(NotFoundError):
    """Raised when an ISBN is not registered in the inventory."""

    code: str = "BOOK_NOT_FOUND"
    message: str = "Book not found in inventory"

    def __init__(self, isbn: str | None = None, message: str | None = None) -> None:
        """Initialize with optional ISBN.

        Args:
            isbn: ISBN that was looked up
            message: Override default message
        """
        details: dict[str, Any] = {}
        if isbn:
            details["isbn"] = isbn
            if not message:
                message = f"Book with ISBN {isbn} not found in inventory"

        super().__init__(message=message, details=details if details else None)


# =============================================================================
# Purchase Errors
# =============================================================================


class PurchaseError(QuantumBooksError):
    """Base class for errors raised while processing a purchase."""

    code: str = "PURCHASE_ERROR"
    message: str = "Purchase could not be completed"


class InsufficientStockError(PurchaseError):
    """Raised when more copies are requested than are in stock."""

    code: str = "INSUFFICIENT_STOCK"
    message: str = "Not enough quantity in stock"

    def __init__(
        self,
        isbn: str | None = None,
        requested: int | None = None,
        available: int | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize with stock figures.

        Args:
            isbn: ISBN of the book
            requested: Quantity asked for
            available: Quantity currently in stock
            message: Override default message
        """
        details: dict[str, Any] = {}
        if isbn:
            details["isbn"] = isbn
        if requested is not None:
            details["requested"] = requested
        if available is not None:
            details["available"] = available

        if not message and requested is not None and available is not None:
            message = (
                f"Not enough quantity in stock: {requested} requested, "
                f"{available} available"
            )

        super().__init__(message=message, details=details if details else None)


class NotForSaleError(PurchaseError):
    """Raised when a purchase or delivery targets a showcase book."""

    code: str = "NOT_FOR_SALE"
    message: str = "This book is not for sale"

    def __init__(self, isbn: str | None = None, message: str | None = None) -> None:
        """Initialize with optional ISBN."""
        details: dict[str, Any] = {}
        if isbn:
            details["isbn"] = isbn
            if not message:
                message = f"Book with ISBN {isbn} is not for sale"

        super().__init__(message=message, details=details if details else None)

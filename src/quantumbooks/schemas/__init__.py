"""Pydantic schemas for validated input and structured output."""

from quantumbooks.schemas.purchase import PurchaseRequest, PurchaseResult

__all__ = [
    "PurchaseRequest",
    "PurchaseResult",
]

"""QuantumBooks - a small in-memory bookstore inventory.

Registers physical, digital and showcase books, clears outdated stock, and
processes purchases that hand off to shipping or email delivery.
"""

__version__ = "0.1.0"

"""Domain Entities - Core business objects."""

from .transaction import PaymentTransaction

__all__ = [
    "PaymentTransaction",
]

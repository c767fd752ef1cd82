"""
Services for processing payment transactions
"""

from .payments import process_all, process_payable

__all__ = [
    "process_all",
    "process_payable",
]

"""
Domain Interfaces (Ports)
"""

from .payable import Payable

__all__ = [
    "Payable",
]

"""
Payments - Transaction Records

Models a single payment transaction with fee calculation,
display formatting and a payment-eligibility check.
"""

__version__ = "0.1.0"

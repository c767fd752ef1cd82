"""
Payments - Demo Entry Point

Builds a couple of transactions, prints their display info and fees,
and runs them through payment processing.

Run with: python -m payments.main
"""

from datetime import datetime
from decimal import Decimal

import structlog

from payments import __version__
from payments.core.config import settings
from payments.core.logging import setup_logging
from payments.domain.entities import PaymentTransaction
from payments.service import process_all


def main() -> None:
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info("demo_started", version=__version__)

    transactions = [
        PaymentTransaction(
            transaction_id="TXN-001",
            amount=Decimal("150.00"),
            currency="USD",
            merchant_id="MERCH-123",
            timestamp=datetime.now(),
        ),
        PaymentTransaction(
            transaction_id="TXN-002",
            amount=Decimal("-50.00"),
            currency="USD",
            merchant_id="MERCH-456",
            timestamp=datetime.now(),
        ),
    ]

    fee_percentage = settings.default_fee_percentage
    for txn in transactions:
        print(txn.get_display_info())
        print(f"Fee ({fee_percentage}%): {txn.calculate_fee(fee_percentage)}")
        print()

    for txn, accepted in zip(transactions, process_all(transactions)):
        outcome = "completed" if accepted else "rejected"
        print(f"Payment {txn.transaction_id}: {outcome}")

    logger.info("demo_finished")


if __name__ == "__main__":
    main()

"""Payment transaction entity."""

import os
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

import structlog

from payments.core.formatting import format_amount, format_timestamp

logger = structlog.get_logger(__name__)

CENTS = Decimal("0.01")
NOT_AVAILABLE = "N/A"


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


@dataclass
class PaymentTransaction:
    """
    A single payment's identifying and monetary data.

    Nothing is validated at construction and every field may be reassigned
    afterwards. Each operation checks the fields it needs when it runs and
    degrades to a safe default instead of raising.

    Attributes:
        transaction_id: Caller-assigned identifier, must be non-empty to pay
        amount: Transaction amount, None when unknown
        currency: ISO 4217 code, only used for display
        merchant_id: Free-form merchant identifier
        timestamp: When the transaction happened, None when unknown
    """

    transaction_id: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    merchant_id: Optional[str]
    timestamp: Optional[datetime]

    @property
    def is_payable(self) -> bool:
        """Check payment eligibility without processing anything."""
        if self.amount is None or self.amount <= 0:
            return False
        return bool(self.transaction_id)

    def calculate_fee(self, fee_percentage: float) -> Decimal:
        """
        Calculate the fee for this transaction.

        The result is rounded half-up to cents, so 1.255 becomes 1.26.

        Args:
            fee_percentage: Fee rate in percent; any value is accepted

        Returns:
            The fee, or 0.00 when the amount is unknown
        """
        if self.amount is None:
            return Decimal("0.00")

        percentage = Decimal(str(fee_percentage))

        # Precision must hold the exact product and every digit left of cents.
        with localcontext() as ctx:
            ctx.prec = max(
                ctx.prec,
                _digits(self.amount) + _digits(percentage) + 2
                + max(0, self.amount.adjusted() + percentage.adjusted() + 1)
                + 3,
            )
            rate = percentage / 100
            return (self.amount * rate).quantize(CENTS, rounding=ROUND_HALF_UP)

    def get_display_info(self, locale: Optional[str] = None) -> str:
        """
        Render the transaction as five labelled lines for end users.

        Args:
            locale: Overrides the configured display locale for this call

        Returns:
            Lines joined with the platform line separator
        """
        amount = (
            format_amount(self.amount, self.currency, locale)
            if self.amount is not None
            else NOT_AVAILABLE
        )
        timestamp = (
            format_timestamp(self.timestamp)
            if self.timestamp is not None
            else NOT_AVAILABLE
        )

        return os.linesep.join(
            [
                f"Transaction ID: {self.transaction_id}",
                f"Amount: {amount}",
                f"Currency: {self.currency}",
                f"Merchant ID: {self.merchant_id}",
                f"Timestamp: {timestamp}",
            ]
        )

    def process_payment(self) -> bool:
        """
        Accept the transaction for payment if it is eligible.

        No payment gateway is contacted and the record is left unchanged,
        so repeated calls give the same answer.
        """
        if not self.is_payable:
            return False

        logger.info("processing_payment", transaction_id=self.transaction_id)
        return True

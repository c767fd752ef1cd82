"""Drive payables through payment processing."""

from typing import Iterable, List

import structlog

from payments.domain.interfaces import Payable

logger = structlog.get_logger(__name__)


def process_payable(payable: Payable) -> bool:
    """
    Process any payable and log the outcome.

    Args:
        payable: Any object with a process_payment() -> bool method

    Returns:
        Whatever the payable reported
    """
    log = logger.bind(payable_type=type(payable).__name__)
    log.info("payment_processing_started")

    accepted = payable.process_payment()

    if accepted:
        log.info("payment_completed")
    else:
        log.warning("payment_rejected")

    return accepted


def process_all(payables: Iterable[Payable]) -> List[bool]:
    """Process payables in order, returning one result per payable."""
    return [process_payable(payable) for payable in payables]

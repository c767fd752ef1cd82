"""Payment capability interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Payable(Protocol):
    """
    Anything that can attempt a payment.

    This is a structural protocol: any class with a matching
    process_payment method satisfies it without inheriting from it.
    """

    def process_payment(self) -> bool:
        """
        Attempt the payment.

        Returns:
            True if the payment was accepted for processing, False if the
            payable is not eligible. Ineligibility is never raised.
        """
        ...

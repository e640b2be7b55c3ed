"""
Ticket Payment Service Interface

Application layer abstraction over the external payment gateway.
The purchase use case depends on this port, never on a concrete gateway.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    """
    Port (interface) for charging an account.

    Implementation (Adapter) owns:
    - Account validation
    - The actual charge
    - Its own retry/timeout policy

    Failures are raised to the caller as-is.
    """

    @abstractmethod
    def make_payment(self, *, account_id: int, amount: int) -> None:
        """
        Charge the account for a ticket purchase.

        Args:
            account_id: Purchasing account
            amount: Total amount to charge, in whole currency units
        """
        pass

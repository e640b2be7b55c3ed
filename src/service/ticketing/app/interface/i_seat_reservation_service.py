"""
Seat Reservation Service Interface

Application layer abstraction over the external seat booking system.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    """Port (interface) for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, *, account_id: int, seat_count: int) -> None:
        """
        Reserve seats for the account.

        Args:
            account_id: Purchasing account
            seat_count: Number of seats to reserve (infants excluded)
        """
        pass

"""
Seat Reservation Service - stand-in for the external seat booking system.
"""

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.domain.validators import is_strict_int


class SeatReservationServiceImpl(ISeatReservationService):
    @Logger.io
    def reserve_seat(self, *, account_id: int, seat_count: int) -> None:
        if not is_strict_int(account_id):
            raise TypeError('account_id must be an integer')
        if not is_strict_int(seat_count):
            raise TypeError('seat_count must be an integer')

        Logger.base.info(f'[RESERVATION] Reserved {seat_count} seat(s) for account {account_id}')

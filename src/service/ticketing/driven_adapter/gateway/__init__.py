"""External gateway adapters"""

from src.service.ticketing.driven_adapter.gateway.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticketing.driven_adapter.gateway.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)

__all__ = ['SeatReservationServiceImpl', 'TicketPaymentServiceImpl']

"""
Ticket Payment Service - stand-in for the external payment gateway.

Performs the gateway's own input checks and logs the charge;
no money actually moves.
"""

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.validators import is_strict_int


class TicketPaymentServiceImpl(ITicketPaymentService):
    @Logger.io
    def make_payment(self, *, account_id: int, amount: int) -> None:
        if not is_strict_int(account_id):
            raise TypeError('account_id must be an integer')
        if not is_strict_int(amount):
            raise TypeError('amount must be an integer')

        Logger.base.info(f'[PAYMENT] Charged account {account_id}: {amount}')

from collections.abc import Sequence

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.ticket_purchase_domain import (
    calculate_seats_to_reserve,
    calculate_total_amount,
    check_business_rules,
    validate_and_aggregate,
)
from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)
from src.service.ticketing.domain.value_object.ticket_request import TicketRequest


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Validate requests and aggregate per-category counts
    2. Check purchase rules on the counts (limit, adult required, infant laps)
    3. Calculate amount to charge and seats to reserve
    4. Charge the account via the payment service
    5. Reserve seats via the seat reservation service

    Account validity is owned by the payment/reservation services.
    Collaborator failures propagate unchanged; if payment fails, no seats
    are reserved. There is no compensation if reservation fails after payment.
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        config: PurchaseConfiguration,
    ) -> None:
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.config = config

    @Logger.io
    def purchase_tickets(
        self, *, account_id: int, ticket_requests: Sequence[TicketRequest]
    ) -> None:
        """
        Raises:
            InvalidPurchaseError: If the requests break any purchase rule
        """
        ticket_counts = validate_and_aggregate(ticket_requests)
        check_business_rules(ticket_counts, self.config)

        total_amount = calculate_total_amount(ticket_counts, self.config)
        seats_to_reserve = calculate_seats_to_reserve(ticket_counts)

        Logger.base.info(
            f'[PURCHASE] account {account_id}: {ticket_counts.to_dict()} '
            f'-> amount {total_amount}, seats {seats_to_reserve}'
        )

        self.payment_service.make_payment(account_id=account_id, amount=total_amount)
        self.seat_reservation_service.reserve_seat(
            account_id=account_id, seat_count=seats_to_reserve
        )

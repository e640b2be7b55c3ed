"""
Ticket Purchase Domain

Pure purchase rules: no payment, no reservation, no infrastructure.
Turns a list of ticket requests into per-category counts, checks the
purchase rules on those counts, and derives the amount to charge and
the number of seats to reserve.
"""

from collections.abc import Sequence
from typing import Any

from src.platform.exception.exceptions import InvalidPurchaseError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.ticket_category import TicketCategory
from src.service.ticketing.domain.validators import is_strict_int
from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)
from src.service.ticketing.domain.value_object.ticket_counts import TicketCounts
from src.service.ticketing.domain.value_object.ticket_request import TicketRequest


def _is_ticket_request(request: Any) -> bool:
    """Structural check: anything exposing a known category and an integer quantity"""
    return isinstance(getattr(request, 'category', None), TicketCategory) and is_strict_int(
        getattr(request, 'quantity', None)
    )


@Logger.io
def validate_and_aggregate(ticket_requests: Sequence[TicketRequest] | None) -> TicketCounts:
    """
    Validate the raw requests and sum quantities per category.

    Requests for the same category are added together, so two separate
    ADULT lines behave exactly like one combined line.

    Raises:
        InvalidPurchaseError: No requests (or not a sequence of requests),
            a malformed request, or a request with zero or negative quantity.
    """
    if not isinstance(ticket_requests, Sequence) or not ticket_requests:
        raise InvalidPurchaseError('At least one ticket request is required')

    if not all(_is_ticket_request(request) for request in ticket_requests):
        raise InvalidPurchaseError('All ticket requests must be valid ticket requests')

    counts = dict.fromkeys(TicketCategory, 0)
    for request in ticket_requests:
        if request.quantity <= 0:
            raise InvalidPurchaseError('Number of tickets must be greater than 0')
        counts[request.category] += request.quantity

    return TicketCounts.from_mapping(counts)


@Logger.io
def check_business_rules(counts: TicketCounts, config: PurchaseConfiguration) -> None:
    """
    Check purchase rules on the aggregated counts, in order:

    1. Total tickets within the per-purchase maximum
    2. Child/Infant tickets need at least one Adult ticket
    3. Infants sit on adult laps, so infants cannot outnumber adults

    Only the first broken rule is reported.
    """
    if counts.total_tickets > config.max_tickets_per_purchase:
        raise InvalidPurchaseError(
            f'Cannot purchase more than {config.max_tickets_per_purchase} tickets at once'
        )

    if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
        raise InvalidPurchaseError(
            'Child and Infant tickets cannot be purchased without Adult tickets'
        )

    if counts.infant > counts.adult:
        raise InvalidPurchaseError(
            'Number of Infant tickets cannot exceed number of Adult tickets'
        )


def calculate_total_amount(counts: TicketCounts, config: PurchaseConfiguration) -> int:
    return sum(counts.of(category) * config.price_of(category) for category in TicketCategory)


def calculate_seats_to_reserve(counts: TicketCounts) -> int:
    # Infants don't get a seat
    return counts.adult + counts.child

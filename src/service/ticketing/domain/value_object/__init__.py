"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)
from src.service.ticketing.domain.value_object.ticket_counts import TicketCounts
from src.service.ticketing.domain.value_object.ticket_request import TicketRequest

__all__ = ['PurchaseConfiguration', 'TicketCounts', 'TicketRequest']

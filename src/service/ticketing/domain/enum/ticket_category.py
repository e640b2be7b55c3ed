"""Ticket Category Enum"""

from enum import StrEnum


class TicketCategory(StrEnum):
    """Closed set of ticket categories sold by the venue"""

    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'

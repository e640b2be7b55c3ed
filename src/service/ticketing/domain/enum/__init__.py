"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.ticket_category import TicketCategory

__all__ = ['TicketCategory']

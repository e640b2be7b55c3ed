"""
Ticket Request Value Object

One purchase line item: a ticket category and how many tickets of it.
Construction guarantees the shape (known category, integer quantity);
positivity of the quantity is a purchase rule checked by the domain service.
"""

import attrs

from src.service.ticketing.domain.enum.ticket_category import TicketCategory
from src.service.ticketing.domain.validators import NumericValidators


@attrs.define(frozen=True)
class TicketRequest:
    """Ticket Request (Value Object)"""

    category: TicketCategory = attrs.field(
        converter=TicketCategory, validator=attrs.validators.instance_of(TicketCategory)
    )
    quantity: int = attrs.field(validator=NumericValidators.validate_strict_int)

"""Ticket Counts Value Object"""

from collections.abc import Mapping
from typing import Self

import attrs

from src.service.ticketing.domain.enum.ticket_category import TicketCategory
from src.service.ticketing.domain.validators import NumericValidators


_count_validators = [NumericValidators.validate_strict_int, NumericValidators.validate_non_negative]


@attrs.define(frozen=True)
class TicketCounts:
    """Per-category ticket totals for a single purchase attempt"""

    adult: int = attrs.field(default=0, validator=_count_validators)
    child: int = attrs.field(default=0, validator=_count_validators)
    infant: int = attrs.field(default=0, validator=_count_validators)

    @classmethod
    def from_mapping(cls, counts: Mapping[TicketCategory, int]) -> Self:
        return cls(
            adult=counts.get(TicketCategory.ADULT, 0),
            child=counts.get(TicketCategory.CHILD, 0),
            infant=counts.get(TicketCategory.INFANT, 0),
        )

    def of(self, category: TicketCategory) -> int:
        return getattr(self, TicketCategory(category).value.lower())

    @property
    def total_tickets(self) -> int:
        return self.adult + self.child + self.infant

    def to_dict(self) -> dict[TicketCategory, int]:
        return {category: self.of(category) for category in TicketCategory}

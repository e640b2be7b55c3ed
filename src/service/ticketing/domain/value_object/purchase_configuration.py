"""
Purchase Configuration Value Object

Fixed prices and limits applied to every purchase. Built once (usually from
Settings) and injected into the purchase use case; never mutated afterwards.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

import attrs

from src.service.ticketing.domain.enum.ticket_category import TicketCategory
from src.service.ticketing.domain.validators import NumericValidators, PriceTableValidators


if TYPE_CHECKING:
    from src.platform.config.core_setting import Settings


def _freeze_price_table(value: Mapping) -> Mapping[TicketCategory, int]:
    return MappingProxyType({TicketCategory(category): price for category, price in value.items()})


@attrs.define(frozen=True)
class PurchaseConfiguration:
    price_by_category: Mapping[TicketCategory, int] = attrs.field(
        converter=_freeze_price_table, validator=PriceTableValidators.validate_price_table
    )
    max_tickets_per_purchase: int = attrs.field(
        validator=[NumericValidators.validate_strict_int, NumericValidators.validate_positive]
    )

    @classmethod
    def from_settings(cls, settings: 'Settings') -> Self:
        return cls(
            price_by_category={
                TicketCategory.ADULT: settings.ADULT_TICKET_PRICE,
                TicketCategory.CHILD: settings.CHILD_TICKET_PRICE,
                TicketCategory.INFANT: settings.INFANT_TICKET_PRICE,
            },
            max_tickets_per_purchase=settings.MAX_TICKETS_PER_PURCHASE,
        )

    def price_of(self, category: TicketCategory) -> int:
        return self.price_by_category[category]

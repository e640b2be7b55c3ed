"""
Unit tests for ticketing value objects.

These test invariants that must hold at construction time.
"""

from types import MappingProxyType

import attrs
import pytest

from src.service.ticketing.domain.enum.ticket_category import TicketCategory
from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)
from src.service.ticketing.domain.value_object.ticket_counts import TicketCounts
from src.service.ticketing.domain.value_object.ticket_request import TicketRequest


@pytest.mark.unit
class TestTicketRequest:
    def test_create_with_category_member(self) -> None:
        request = TicketRequest(category=TicketCategory.CHILD, quantity=2)

        assert request.category is TicketCategory.CHILD
        assert request.quantity == 2

    def test_category_string_is_converted(self) -> None:
        request = TicketRequest(category='INFANT', quantity=1)

        assert request.category is TicketCategory.INFANT

    def test_unknown_category_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            TicketRequest(category='SENIOR', quantity=1)

    @pytest.mark.parametrize('quantity', ['2', 2.0, None, True])
    def test_non_integer_quantity_is_rejected(self, quantity) -> None:
        with pytest.raises(TypeError, match='quantity must be an integer'):
            TicketRequest(category=TicketCategory.ADULT, quantity=quantity)

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_non_positive_quantity_is_allowed_at_construction(self, quantity: int) -> None:
        """Positivity is a purchase rule, not a construction rule"""
        assert TicketRequest(category=TicketCategory.ADULT, quantity=quantity).quantity == quantity

    def test_is_immutable(self) -> None:
        request = TicketRequest(category=TicketCategory.ADULT, quantity=1)

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            request.quantity = 5  # type: ignore[misc]


@pytest.mark.unit
class TestTicketCounts:
    def test_defaults_to_zero_for_every_category(self) -> None:
        counts = TicketCounts()

        assert counts.to_dict() == {category: 0 for category in TicketCategory}
        assert counts.total_tickets == 0

    def test_of_looks_up_by_category(self) -> None:
        counts = TicketCounts(adult=3, child=2, infant=1)

        assert counts.of(TicketCategory.ADULT) == 3
        assert counts.of(TicketCategory.CHILD) == 2
        assert counts.of(TicketCategory.INFANT) == 1
        assert counts.total_tickets == 6

    def test_from_mapping_fills_missing_categories(self) -> None:
        counts = TicketCounts.from_mapping({TicketCategory.CHILD: 4})

        assert counts == TicketCounts(child=4)

    def test_from_mapping_accepts_read_only_mapping(self) -> None:
        counts = TicketCounts.from_mapping(
            MappingProxyType({TicketCategory.ADULT: 2, TicketCategory.INFANT: 1})
        )

        assert counts == TicketCounts(adult=2, infant=1)

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValueError, match='adult cannot be negative'):
            TicketCounts(adult=-1)


@pytest.mark.unit
class TestPurchaseConfiguration:
    def test_price_of(self, purchase_config: PurchaseConfiguration) -> None:
        assert purchase_config.price_of(TicketCategory.ADULT) == 25
        assert purchase_config.price_of(TicketCategory.CHILD) == 15
        assert purchase_config.price_of(TicketCategory.INFANT) == 0
        assert purchase_config.max_tickets_per_purchase == 25

    def test_string_keys_are_converted(self) -> None:
        config = PurchaseConfiguration(
            price_by_category={'ADULT': 25, 'CHILD': 15, 'INFANT': 0}, max_tickets_per_purchase=25
        )

        assert set(config.price_by_category) == set(TicketCategory)

    def test_price_table_is_read_only(self, purchase_config: PurchaseConfiguration) -> None:
        with pytest.raises(TypeError):
            purchase_config.price_by_category[TicketCategory.ADULT] = 0  # type: ignore[index]

    def test_price_table_is_copied(self) -> None:
        prices = {TicketCategory.ADULT: 25, TicketCategory.CHILD: 15, TicketCategory.INFANT: 0}
        config = PurchaseConfiguration(price_by_category=prices, max_tickets_per_purchase=25)

        prices[TicketCategory.ADULT] = 100

        assert config.price_of(TicketCategory.ADULT) == 25

    def test_missing_category_price_is_rejected(self) -> None:
        with pytest.raises(ValueError, match='Missing ticket price for: INFANT'):
            PurchaseConfiguration(
                price_by_category={TicketCategory.ADULT: 25, TicketCategory.CHILD: 15},
                max_tickets_per_purchase=25,
            )

    def test_negative_price_is_rejected(self) -> None:
        with pytest.raises(ValueError, match='cannot be negative'):
            PurchaseConfiguration(
                price_by_category={
                    TicketCategory.ADULT: 25,
                    TicketCategory.CHILD: -1,
                    TicketCategory.INFANT: 0,
                },
                max_tickets_per_purchase=25,
            )

    @pytest.mark.parametrize('limit', [0, -5])
    def test_non_positive_limit_is_rejected(self, limit: int) -> None:
        with pytest.raises(ValueError, match='must be greater than 0'):
            PurchaseConfiguration(
                price_by_category={
                    TicketCategory.ADULT: 25,
                    TicketCategory.CHILD: 15,
                    TicketCategory.INFANT: 0,
                },
                max_tickets_per_purchase=limit,
            )

    def test_from_settings(self, default_settings) -> None:
        config = PurchaseConfiguration.from_settings(default_settings)

        assert dict(config.price_by_category) == {
            TicketCategory.ADULT: 25,
            TicketCategory.CHILD: 15,
            TicketCategory.INFANT: 0,
        }
        assert config.max_tickets_per_purchase == 25

"""
Unit test configuration for ticketing service.

Provides mocks of the payment and seat reservation ports, plus a use case
wired to them, so purchase logic is tested without any gateway.
"""

from unittest.mock import Mock

import pytest

from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)


@pytest.fixture
def mock_payment_service() -> Mock:
    """Mock payment gateway"""
    return Mock(spec=ITicketPaymentService)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    """Mock seat reservation system"""
    return Mock(spec=ISeatReservationService)


@pytest.fixture
def collaborator_calls(mock_payment_service: Mock, mock_seat_reservation_service: Mock) -> Mock:
    """Parent mock recording payment and reservation calls in order"""
    parent = Mock()
    parent.attach_mock(mock_payment_service, 'payment_service')
    parent.attach_mock(mock_seat_reservation_service, 'seat_reservation_service')
    return parent


@pytest.fixture
def purchase_tickets_use_case(
    mock_payment_service: Mock,
    mock_seat_reservation_service: Mock,
    purchase_config: PurchaseConfiguration,
) -> PurchaseTicketsUseCase:
    """Create use case with mocked dependencies"""
    return PurchaseTicketsUseCase(
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
        config=purchase_config,
    )

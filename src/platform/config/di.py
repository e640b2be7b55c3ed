"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.value_object.purchase_configuration import (
    PurchaseConfiguration,
)
from src.service.ticketing.driven_adapter.gateway.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticketing.driven_adapter.gateway.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    purchase_configuration = providers.Singleton(
        PurchaseConfiguration.from_settings, settings=config_service
    )

    # External gateways
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases (stateless, can be Singleton)
    purchase_tickets_use_case = providers.Singleton(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        config=purchase_configuration,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.purchase_configuration()


def cleanup() -> None:
    container.reset_singletons()

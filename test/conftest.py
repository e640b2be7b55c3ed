"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log directory, service context)
- Default purchase configuration and settings fixtures
- Dependency-injection container reset between tests

Architecture:
- Unit tests (test/**/unit/): Stub or mock the payment/reservation ports
- Integration tests (test/**/integration/): BDD scenarios through the wired container
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# src.platform.logging reads TEST_LOG_DIR and settings at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'ticketing-test')
    os.environ.setdefault('DEPLOY_ENV', 'test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.service.ticketing.domain.enum.ticket_category import TicketCategory  # noqa: E402
from src.service.ticketing.domain.value_object.purchase_configuration import (  # noqa: E402
    PurchaseConfiguration,
)


@pytest.fixture
def default_settings() -> Settings:
    """Settings with the built-in defaults, ignoring any .env file"""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def purchase_config() -> PurchaseConfiguration:
    return PurchaseConfiguration(
        price_by_category={
            TicketCategory.ADULT: 25,
            TicketCategory.CHILD: 15,
            TicketCategory.INFANT: 0,
        },
        max_tickets_per_purchase=25,
    )


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Drop cached singletons and overrides so every test starts from a clean container"""
    yield
    container.reset_override()
    container.reset_singletons()

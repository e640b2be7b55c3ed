from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Tickets'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Ticket prices (whole currency units)
    ADULT_TICKET_PRICE: int = 25
    CHILD_TICKET_PRICE: int = 15
    INFANT_TICKET_PRICE: int = 0

    # Purchase limits
    MAX_TICKETS_PER_PURCHASE: int = 25

    @field_validator('ADULT_TICKET_PRICE', 'CHILD_TICKET_PRICE', 'INFANT_TICKET_PRICE')
    @classmethod
    def validate_non_negative_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError('Ticket price cannot be negative')
        return v

    @field_validator('MAX_TICKETS_PER_PURCHASE')
    @classmethod
    def validate_positive_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('Maximum tickets per purchase must be positive')
        return v


settings = Settings()  # type: ignore

from pathlib import Path
from typing import List

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

    PROJECT_NAME: str = 'Ride Reservation'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Seat holds
    HOLD_TTL_SECONDS: int = 600  # 10 minutes
    HOLD_SWEEP_INTERVAL_SECONDS: float = 15.0

    # Reservation sessions
    SESSION_IDLE_TIMEOUT_SECONDS: int = 1800
    MAX_SEATS_PER_SESSION: int = 1  # single passenger flow
    MAX_EXTRA_QUANTITY: int = 5

    # Bookings
    CONFIRMATION_CODE_LENGTH: int = 6
    DEFAULT_CURRENCY: str = 'USD'

    # Demo trip catalog (in-memory)
    SEED_DEMO_CATALOG: bool = True

    @field_validator('HOLD_TTL_SECONDS', 'SESSION_IDLE_TIMEOUT_SECONDS', 'MAX_SEATS_PER_SESSION')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be a positive integer')
        return v


settings = Settings()  # type: ignore

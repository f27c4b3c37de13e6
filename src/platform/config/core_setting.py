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

    PROJECT_NAME: str = 'Showtime Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Booking limits
    MAX_SEATS_PER_BOOKING: int = 10
    REFERENCE_MINT_ATTEMPTS: int = 5

    # Seat inventory locking (bounded wait for claim / release)
    SEAT_LOCK_TIMEOUT_SECONDS: float = 5.0

    # Offer rules
    DISCOUNT_WINDOW_START_HOUR: int = 12  # inclusive, showing local time
    DISCOUNT_WINDOW_END_HOUR: int = 17  # exclusive
    DISCOUNT_WINDOW_PERCENT: int = 20
    BULK_OFFER_MIN_SEATS: int = 3
    BULK_OFFER_PERCENT: int = 50

    # Showing status escalation
    ALMOST_FULL_RATIO: float = 0.1

    # Register a sample showing on startup (local demo only)
    SEED_SAMPLE_DATA: bool = False


settings = Settings()  # type: ignore

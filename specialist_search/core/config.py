from dotenv import load_dotenv
load_dotenv()
import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """
    Service configuration.

    Values can be overridden via environment variables or a local `.env` file.
    """

    APP_NAME: str = os.getenv("APP_NAME", "Specialist Search Service")
    APP_VERSION: str = os.getenv("APP_VERSION", "0.1.0")

    # Server binding
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    # Route prefix for the specialist endpoints
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/specialists")

    CORS_ALLOW_ORIGINS: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173")
        )
    )

    # Load the fixed sample rows on startup
    SEED_SAMPLE_DATA: bool = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()

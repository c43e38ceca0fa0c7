import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "Leave Tracker"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./leave_tracker.db")

    version: str = "1.0.0"
    build_id: str = os.getenv("BUILD_ID", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,http://127.0.0.1:5173,"
                "http://localhost:3000,http://127.0.0.1:3000",
            ).split(",")
            if o.strip()
        ]
    )

    # Rate limiting
    rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "120"))

    # Leave defaults
    # Holidays saved without a region, and branches without one, share this region
    default_holiday_region: str = os.getenv("DEFAULT_HOLIDAY_REGION", "default")
    # 28 days x 8h
    default_allowance_hours: float = float(os.getenv("DEFAULT_ALLOWANCE_HOURS", "224"))

settings = Config()

_logger = logging.getLogger(__name__)
if settings.environment == "production" and settings.database_url.startswith("sqlite"):
    _logger.warning("Running in production against SQLite; set DATABASE_URL to a PostgreSQL URL.")

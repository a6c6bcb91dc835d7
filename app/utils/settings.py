# app/utils/settings.py
import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost",
    "http://localhost:80",
    "http://localhost:3000",
    "http://frontend",
    "http://frontend:80",
)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./products.db")
API_PREFIX = os.getenv("API_PREFIX", "").rstrip("/")
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS)).split(",")
    if o.strip()
]
SEED_DATA = os.getenv("SEED_DATA", "true").lower() == "true"
PRODUCT_API_URL = os.getenv("PRODUCT_API_URL", "http://localhost:8000")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 10))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    database_url: str = DATABASE_URL
    api_prefix: str = API_PREFIX
    cors_origins: list[str] = field(default_factory=lambda: list(CORS_ORIGINS))
    seed_data: bool = SEED_DATA


def get_settings() -> Settings:
    return Settings()

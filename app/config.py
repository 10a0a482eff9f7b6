# app/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from pathlib import Path
from typing import List
from functools import lru_cache

class Settings(BaseSettings):
    ENV: str = "development"
    SERVICE_NAME: str = "Catalog API"
    DATA_DIR: Path = Path("data")  # where the collection files live
    PRODUCTS_FILE: str = "products.csv"

    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    # fill an empty products collection with the demo catalog on startup
    SEED_INITIAL_DATA: bool = False
    SLOW_REQUEST_THRESHOLD_SECONDS: float = 3.0

    # Example .env:
    # DATA_DIR=./data
    # SEED_INITIAL_DATA=true
    # CORS_ORIGINS=http://localhost:3000,http://localhost:5173

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

settings = get_settings()

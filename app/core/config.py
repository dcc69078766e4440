from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings


DEFAULT_CHAPTER_MAP = {
    "ch2": (
        "https://gist.githubusercontent.com/tavishhill03-png/58d6f124dee022d6bfc5978bcff1eeba"
        "/raw/8b19ba4ee20c5f9de8a435812010d2c0e7db48ab/manifest_ch2.json"
    ),
}


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | staging | prod
    APP_NAME: str = "Manifest Lookup API"
    APP_VERSION: str = "0.1.0"

    # Security (vide = pas d'authentification)
    WEBHOOK_KEY: str = ""

    # Sources distantes
    CHAPTER_MAP: Dict[str, str] = DEFAULT_CHAPTER_MAP  # JSON dans l'env
    CACHE_TTL: float = 300  # secondes
    FETCH_TIMEOUT: float = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()

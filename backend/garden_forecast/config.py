"""Application configuration loaded from environment variables via pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables and/or a .env file located
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # --- Catalog data (crops, climates, regions, yield factors) ---
    DATA_DIR: Path = PACKAGE_DIR / "data"

    # --- HTTP ---
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # --- Forecast defaults ---
    DEFAULT_CROPS: list[str] = [
        "tomatoes",
        "cucumbers",
        "bellPeppers",
        "eggplant",
        "hotPeppers",
    ]

    # --- Request limiting ---
    RATE_LIMIT_WINDOW_SECONDS: int = 15 * 60
    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_BLOCK_SECONDS: int = 60 * 60


settings = Settings()

"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DATABASE_URL: str = "sqlite:///./forage.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Seed data (item definitions, effects, weapon stats)
    SEED_DATA_DIR: str = ""  # empty = bundled forage/data
    SEED_DEMO_PLAYERS: bool = False


settings = Settings()

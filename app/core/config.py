"""Application settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration."""

    APP_NAME: str = "School List"
    DEBUG: bool = False

    # API
    API_BASE_URL: str = "http://localhost:5000"
    SCHOOLS_PATH: str = "/api/schools"
    REQUEST_TIMEOUT: float = 30.0  # seconds

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

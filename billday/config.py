"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "billday"
    log_level: str = "INFO"

    # Due bill classification
    due_soon_days: int = 7
    upcoming_bills_limit: int = 5

    # Bark push notifications
    bark_api_url: str = ""
    http_timeout_seconds: float = 10.0
    notify_max_retries: int = 3
    notify_backoff_base: float = 1.0  # Exponential backoff base in seconds


settings = Settings()

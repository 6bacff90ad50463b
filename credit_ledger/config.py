"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./credit_ledger.db"

    # Service
    service_name: str = "credit-ledger"
    log_level: str = "INFO"

    # Payment projection
    projection_months: int = 6  # Months after the current one (window holds projection_months + 1)
    month_label_format: str = "%b %y"


settings = Settings()

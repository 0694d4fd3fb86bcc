"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "ledger-insights"
    log_level: str = "INFO"

    # Analysis views
    top_category_count: int = 7
    period_category_limit: int = 6
    default_horizons: List[int] = [3, 6, 12]
    recent_transaction_limit: int = 20

    # Coach context
    coach_horizons: List[int] = [1, 3, 6, 12]
    coach_transaction_limit: int = 15
    coach_subscription_limit: int = 10
    default_savings_goal: float = 5000.0


settings = Settings()

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    # Checkout (amounts in pence)
    free_shipping_threshold: int = 0
    standard_shipping_cost: int = 0

    # DynamoDB
    aws_region: Optional[str] = None
    dynamodb_endpoint_url: Optional[str] = None
    orders_table_name: str = "orders"
    order_key_prefix: str = "ORDER"
    customer_key_prefix: str = "CUSTOMER"
    order_entity_type: str = "ORDER"
    orders_gsi1_index: str = "gsi1"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)

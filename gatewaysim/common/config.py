"""Central environment-driven settings for the simulator.

Loaded once per process. Values come from environment variables or a local
`.env` file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "gateway-sim"
    log_level: str = "INFO"
    create_transaction_url: str = "http://braintree.example.com/transactions"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = GatewaySettings()

"""
Adapter configuration using Pydantic Settings.

This module provides configuration management for the exchange adapters,
allowing environment-based configuration with type validation and defaults.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.xchange.enums import Exchange


class AbucoinsConfig(BaseSettings):
    """Abucoins connection configuration, consumed by raw REST clients."""

    model_config = SettingsConfigDict(env_prefix="XCHANGE_ABUCOINS_")

    exchange: Exchange = Exchange.ABUCOINS
    ssl_uri: str = "https://api.abucoins.com"
    api_key: str = Field(default="", description="Abucoins API key")
    secret_key: str = Field(default="", description="Abucoins API secret")
    passphrase: str = Field(default="", description="Abucoins API passphrase")

    @property
    def has_credentials(self) -> bool:
        """Check if authenticated endpoints can be signed."""
        return bool(self.api_key and self.secret_key and self.passphrase)


class XchangeConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="XCHANGE_")

    # Sub-configurations
    abucoins: AbucoinsConfig = Field(default_factory=AbucoinsConfig)

    # Global settings
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "XchangeConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured XchangeConfig instance

        """
        return cls(abucoins=AbucoinsConfig())


def configure_logging(settings: XchangeConfig) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


# Global config instance
config = XchangeConfig.from_env()

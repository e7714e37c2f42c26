"""
PURPOSE: Configuration settings for the MNQ Strat webhook relay.

This module uses Pydantic Settings to manage configuration from environment
variables and .env files. All settings are validated and typed.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    PURPOSE: Central configuration class for the webhook relay.

    Holds the Discord destination for each timeframe channel, outbound
    request limits, and server/runtime settings. Settings are loaded from
    environment variables and the .env file.
    """

    # Discord Webhook Destinations (one per timeframe channel).
    # An empty value means the channel is not configured: alerts are still
    # accepted and formatted but only logged.
    DISCORD_WEBHOOK_1MIN: str = ""
    DISCORD_WEBHOOK_15MIN: str = ""
    DISCORD_TIMEOUT_SECONDS: float = 10.0

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # System Settings
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    def webhook_url_for(self, timeframe: str) -> Optional[str]:
        """
        PURPOSE: Resolve the Discord webhook URL configured for a timeframe channel.

        CALLED BY: AlertRelay.relay(), application startup checks

        Args:
            timeframe: Timeframe label, e.g. "1min" or "15min".

        Returns:
            Optional[str]: The stripped URL, or None when the channel has no
                destination configured.
        """
        urls = {
            "1min": self.DISCORD_WEBHOOK_1MIN,
            "15min": self.DISCORD_WEBHOOK_15MIN,
        }
        url = urls.get(timeframe, "").strip()
        return url or None

    class Config:
        """Pydantic model configuration."""

        env_file: str = ".env"
        env_file_encoding: str = "utf-8"
        case_sensitive: bool = True
        extra: str = "ignore"


settings: Settings = Settings()

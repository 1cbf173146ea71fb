"""Application configuration for the Alexa bridge."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Bridge configuration loaded from environment variables.

    Attributes:
        amazon_domain: Amazon site of the account (amazon.com, amazon.de, ...)
        alexa_cookie: Cookie header of an authenticated Alexa web session
        alexa_timeout: Timeout for Alexa API requests in seconds
        devices: Display names to expose; None exposes every device
        devices_config_path: YAML file with a ``devices`` list, used when
            DEVICES is unset
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    amazon_domain: str = Field(default="amazon.com")
    alexa_cookie: str = Field(default="")
    alexa_timeout: float = Field(default=10.0, gt=0)
    devices: list[str] | None = Field(default=None)
    devices_config_path: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @property
    def alexa_base_url(self) -> str:
        return f"https://alexa.{self.amazon_domain}"

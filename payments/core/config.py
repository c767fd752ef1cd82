"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import is_currency
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables with the
    PAYMENTS_ prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "payment-transactions"
    app_version: str = "0.1.0"

    # Display
    display_locale: str = Field(
        default="en_US",
        description="Locale used to format amounts in display info",
    )
    default_currency: str = Field(
        default="USD",
        description="Currency used when a record carries an unrecognized code",
    )

    # Fees
    default_fee_percentage: float = Field(
        default=2.5,
        description="Fee percentage applied by the demo entry point",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("display_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Ensure the locale is one Babel can format with."""
        try:
            Locale.parse(v)
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Unknown display locale: '{v}'") from e
        return v

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """The fallback currency must itself be a valid ISO 4217 code."""
        if len(v) != 3 or not v.isupper() or not is_currency(v):
            raise ValueError(f"Invalid default currency: '{v}'")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

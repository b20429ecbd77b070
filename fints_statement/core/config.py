# fints_statement/core/config.py
"""Configuration management for the statement client, with validation."""

from typing import List
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fints_statement.shared.utils.logging_config import get_logger

logger = get_logger(__name__)


class ApplicationConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FINTS_STATEMENT_APP__")
    """Application-level settings."""

    app_name: str = Field(default="FinTS Statement Client", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class ProtocolConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FINTS_STATEMENT_PROTOCOL__")
    """Wire-protocol settings for the statement request."""

    known_versions: List[int] = Field(
        default=[4, 5, 6, 7],
        description="Statement request versions this client can encode"
    )
    no_data_status_codes: List[int] = Field(
        default=[3010],
        description="Status codes meaning 'no data available' for the requested range"
    )
    default_country_code: str = Field(
        default="280",
        description="ISO 3166-1 numeric country code used for bank identifiers (280 = Germany)",
        min_length=3,
        max_length=3
    )

    @field_validator('known_versions')
    @classmethod
    def validate_known_versions(cls, v):
        unsupported = [version for version in v if version not in (4, 5, 6, 7)]
        if unsupported:
            raise ValueError(f'No request encoding exists for versions: {unsupported}')
        return sorted(set(v))


class ParsingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FINTS_STATEMENT_PARSING__")
    """Statement-text parsing settings."""

    default_currency: str = Field(
        default="EUR",
        description="Currency used when a record carries no opening balance",
        min_length=3,
        max_length=3
    )
    compute_running_balance: bool = Field(
        default=True,
        description="Derive the balance after each booking from the opening balance"
    )


class StatementClientConfig(BaseSettings):
    """
    Combined configuration for the statement client.

    Each section can be overridden through environment variables, e.g.
    ``FINTS_STATEMENT_PARSING__DEFAULT_CURRENCY=CHF``.
    """

    app: ApplicationConfig = Field(default_factory=ApplicationConfig)
    protocol: ProtocolConfig = Field(default_factory=ProtocolConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)

    model_config = SettingsConfigDict(
        env_prefix="FINTS_STATEMENT_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )


@lru_cache()
def get_config() -> StatementClientConfig:
    """Get the configuration instance with caching."""
    try:
        config = StatementClientConfig()
        logger.debug("Statement client configuration loaded")
        return config
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}", exc_info=True)
        raise


def reset_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    get_config.cache_clear()

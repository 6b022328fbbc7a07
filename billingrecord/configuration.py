"""Mini README: Centralised configuration for BillingRecord.

Structure:
    * BillingRecordSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and web interface.

Usage:
    Variables use the ``BILLINGRECORD_`` prefix (for example
    ``BILLINGRECORD_INTERFACE_PORT=9000``) and may also live in a ``.env``
    file. Settings are validated once per process; tests call
    ``get_settings.cache_clear()`` after changing the environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingRecordSettings(BaseSettings):
    """Runtime configuration for the ledger service and console."""

    model_config = SettingsConfigDict(
        env_prefix="BILLINGRECORD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "¥",
        description="Symbol prefixed to every displayed amount.",
    )
    placeholder_description: str = Field(
        "unspecified",
        description="Label stored when a transaction is recorded without a description.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("placeholder_description")
    @classmethod
    def _reject_blank_placeholder(cls, value: str) -> str:
        """A blank placeholder would defeat description normalisation."""

        if not value.strip():
            raise ValueError("placeholder_description must not be blank")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> BillingRecordSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BillingRecordSettings()

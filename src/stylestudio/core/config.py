"""Configuration management for Style Studio.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the STYLESTUDIO_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (STYLESTUDIO_* prefix)
2. .env file in the project root
3. Default values defined in StudioConfig

The Gemini API key is the one exception to the prefix rule: it is read from
``STYLESTUDIO_GEMINI_API_KEY`` or, failing that, the conventional
``GEMINI_API_KEY`` variable used by Google's own tooling.

Example .env file:
    GEMINI_API_KEY=your-key-here
    STYLESTUDIO_GEMINI_MODEL=gemini-2.5-flash-image
    STYLESTUDIO_HISTORY_CAPACITY=36
    STYLESTUDIO_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
Missing credentials do not fail at import; the generation client checks for
the key when it is constructed.

Usage Example
-------------
    from stylestudio.core.config import config

    print(config.gemini_model)
    print(config.history_capacity)
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StudioConfig(BaseSettings):
    """Main configuration for Style Studio.

    Attributes
    ----------
    Gemini Settings:
        gemini_api_key : SecretStr | None
            API key for the Gemini Developer API
        gemini_model : str
            Image-capable Gemini model used for generation

    Session Settings:
        history_capacity : int
            Number of generated images kept in the session history
        max_upload_bytes : int
            Upper bound for a single uploaded source image

    Server Settings:
        server_host : str
            Bind address for the API server
        server_port : int
            Port for the API server (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the CLI entry point

    Examples
    --------
        >>> custom_config = StudioConfig(
        ...     gemini_api_key="test-key",
        ...     history_capacity=10,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STYLESTUDIO_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Gemini settings
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("STYLESTUDIO_GEMINI_API_KEY", "gemini_api_key"),
        description="API key for the Gemini Developer API",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model that returns inline image parts",
    )

    # Session settings
    history_capacity: int = Field(
        default=36,
        description="Most recent generated images kept in history",
        ge=1,
        le=500,
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted size of an uploaded source image",
        ge=1024,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI entry point",
    )


# Global configuration instance
config = StudioConfig()

"""Configuration management for the Zodiac Prompt Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the ZODIACPROMPT_
prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (ZODIACPROMPT_* prefix)
2. .env file in the project root
3. Default values defined in ZodiacPromptConfig

Example .env file:
    ZODIACPROMPT_DEFAULT_TONE=light
    ZODIACPROMPT_DEFAULT_TEMPLATE=classic
    ZODIACPROMPT_SERVER_PORT=8080

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from zodiacprompt.core.config import config

    print(config.default_theme)
    print(config.server_port)

Selection Defaults vs. Fallback Keys
------------------------------------
The ``default_*`` settings are what the form shows when the page first loads.
They are unrelated to the per-table fallback keys (female / neutral / space /
Aries), which are fixed in :mod:`zodiacprompt.core.fragments` and are not
configurable.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ZodiacPromptConfig(BaseSettings):
    """Main configuration for the Zodiac Prompt Generator.

    Attributes
    ----------
    Form Defaults:
        default_gender : str
            Gender option preselected in the form
        default_tone : str
            Tone option preselected in the form
        default_theme : str
            Theme option preselected in the form
        default_template : Literal["classic", "rich"]
            Template used when a request does not name one

    Copy Feedback:
        status_clear_ms : int
            Delay before the "Copied all prompts!" status clears
        row_status_clear_ms : int
            Delay before a per-sign "Copied!" status clears

    Paths:
        static_dir : Path
            Directory served at ``/static`` (browser script)
        templates_dir : Path
            Directory holding ``index.html``

    Server:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the CLI entry point

    Examples
    --------
        >>> custom = ZodiacPromptConfig(default_tone="light", server_port=8080)
        >>> custom.default_tone
        'light'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ZODIACPROMPT_",
        case_sensitive=False,
    )

    # Form defaults
    default_gender: str = Field(
        default="female",
        description="Gender option preselected in the form",
    )
    default_tone: str = Field(
        default="dark",
        description="Tone option preselected in the form",
    )
    default_theme: str = Field(
        default="winter",
        description="Theme option preselected in the form",
    )
    default_template: Literal["classic", "rich"] = Field(
        default="rich",
        description="Template used when a request does not name one",
    )

    # Copy feedback timings (milliseconds)
    status_clear_ms: int = Field(default=1400, ge=0, le=10000)
    row_status_clear_ms: int = Field(default=1200, ge=0, le=10000)

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory served at /static",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Directory holding index.html",
    )

    # Server settings
    server_host: str = Field(
        default="127.0.0.1",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7870,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI entry point",
    )


# Global configuration instance
config = ZodiacPromptConfig()

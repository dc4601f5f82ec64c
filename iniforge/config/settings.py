"""
settings.py

This module provides application configuration management for iniforge.

Features:
- Centralized application configuration using Pydantic settings
- Defaults for the parser (case transform, invalid line policy) and the
  interpolation resolver (default section, recursion depth)
- Location of the default configuration file used by the command line

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from iniforge.models.dataModel import Transform

# Console instance for rich output
console: Final[Console] = Console()

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("iniforge", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.ini"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with INIFORGE_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        transform: Case transform applied to section and key names
        defaultSection: Fallback section consulted by interpolation
        interpolationDepth: Longest chain of nested placeholders
        encoding: Text encoding of configuration files
        lenient: Log invalid lines instead of aborting the load (CLI only)
    """

    beQuiet: bool = False
    transform: Transform = Transform.NONE
    defaultSection: str = "DEFAULT"
    interpolationDepth: int = Field(default=10, ge=1)
    encoding: str = "utf-8"
    lenient: bool = False

    model_config = SettingsConfigDict(
        env_prefix="INIFORGE_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="ignore",
    )


# Create the application settings instance
appsettings: Final[App] = App()

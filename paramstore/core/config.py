# coding: utf-8
"""
Store configuration.

Settings can be built directly or read from PARAMSTORE_* environment
variables (a .env file is honoured through python-dotenv).
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PARAMSTORE_"


class StoreSettings(BaseModel):
    """Serialization, durability and logging settings for a parameter store."""

    encoding: str = Field(default="utf-8", description="Text encoding of the parameter file")
    indent: Optional[int] = Field(
        default=4,
        ge=0,
        description="JSON indent used when rewriting the file (None for compact output)"
    )
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters on write")
    fsync: bool = Field(
        default=True,
        description="fsync the temporary file before renaming it over the original"
    )
    temp_suffix: str = Field(
        default=".tmp",
        min_length=1,
        description="Suffix appended to the file path for the temporary file"
    )
    log_level: str = Field(default="WARNING", description="Level for the paramstore logger")

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "StoreSettings":
        """
        Build settings from the environment.

        Args:
            dotenv_path: Optional .env file to load first; without it
                python-dotenv searches upwards from the working directory

        Returns:
            Validated settings; unset variables keep their defaults
        """
        load_dotenv(dotenv_path)

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            if name == "indent" and raw.strip().lower() in ("", "none"):
                values[name] = None
            else:
                values[name] = raw
        return cls.model_validate(values)


def configure_logging(settings: Optional[StoreSettings] = None) -> logging.Logger:
    """
    Set the package logger level from settings.

    Handlers are left to the application; this only adjusts the level.
    """
    settings = settings or StoreSettings()
    package_logger = logging.getLogger("paramstore")
    package_logger.setLevel(settings.log_level)
    return package_logger

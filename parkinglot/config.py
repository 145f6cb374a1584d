import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_TOTAL_SLOTS = "PARKINGLOT_TOTAL_SLOTS"
ENV_LOG_LEVEL = "PARKINGLOT_LOG_LEVEL"
ENV_LOG_FILE = "PARKINGLOT_LOG_FILE"


class Settings(BaseModel):
    # When set, the lot is created at start-up without asking for a size.
    total_slots: Optional[int] = None

    log_level: str = "WARNING"

    # Plain-text log file written next to the console output.
    log_file: Optional[str] = None

    @field_validator("total_slots")
    @classmethod
    def _check_total_slots(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("total_slots must be a positive number")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from PARKINGLOT_* environment variables."""
        environ = os.environ if environ is None else environ

        values = {}
        if environ.get(ENV_TOTAL_SLOTS, "").strip():
            values["total_slots"] = environ[ENV_TOTAL_SLOTS].strip()
        if environ.get(ENV_LOG_LEVEL, "").strip():
            values["log_level"] = environ[ENV_LOG_LEVEL]
        if environ.get(ENV_LOG_FILE, "").strip():
            values["log_file"] = environ[ENV_LOG_FILE].strip()

        return cls(**values)

"""Pydantic models for fluent-pytest configuration."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class FluentConfig(BaseModel):
    """Root configuration model for fluent checks."""

    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_checks: bool = Field(False, description="Whether to echo every check to the console")
    use_colors: bool = Field(True, description="Whether to use colors in console output")
    history_file: Optional[Path] = Field(
        None, description="Path to export the check history as JSON at session end"
    )
    max_history: int = Field(10000, description="Maximum number of check records kept")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("max_history")
    @classmethod
    def validate_max_history(cls, v: int) -> int:
        """Validate history size is positive."""
        if v <= 0:
            raise ValueError("max_history must be positive")
        return v

"""
Configuration models using Pydantic for type-safe validation.

This module defines the configuration models for the trend engine:
- SystemConfig: Log level, JSON logs, log file
- EngineConfig: EMA smoothing factors, imbalance threshold, capital
- FeedConfig: Synthetic feed selection and length
- AppConfig: Complete application configuration
"""

from typing import List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..market_data.feeds import FEEDS


# ============================================================================
# Enums for Configuration
# ============================================================================

class LogLevel(str, Enum):
    """Logging level."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ============================================================================
# System Configuration
# ============================================================================

class SystemConfig(BaseModel):
    """System-wide settings."""

    model_config = ConfigDict(use_enum_values=True)

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level"
    )

    json_logs: bool = Field(
        default=False,
        description="Emit logs as JSON objects"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names from env vars."""
        if isinstance(v, str):
            return v.upper()
        return v


# ============================================================================
# Decision Engine Configuration
# ============================================================================

class EngineConfig(BaseModel):
    """Decision engine parameters."""

    alpha_fast: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Fast EMA smoothing factor (higher = more reactive)"
    )

    alpha_slow: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Slow EMA smoothing factor (baseline trend)"
    )

    imbalance_threshold: float = Field(
        default=0.1,
        ge=0.0,
        lt=1.0,
        description="Minimum |imbalance| required to arm a signal"
    )

    starting_capital: float = Field(
        default=100000.0,
        gt=0.0,
        description="Initial cash balance"
    )

    @model_validator(mode='after')
    def fast_more_reactive_than_slow(self):
        """Validate that alpha_fast > alpha_slow."""
        if self.alpha_fast <= self.alpha_slow:
            raise ValueError('alpha_fast must be > alpha_slow')
        return self


# ============================================================================
# Feed Configuration
# ============================================================================

class FeedConfig(BaseModel):
    """Synthetic feed settings for the profit tests."""

    ticks: int = Field(
        default=120,
        ge=1,
        le=1_000_000,
        description="Snapshots per profit test"
    )

    enabled_feeds: List[str] = Field(
        default=["triangle", "noisy_triangle"],
        description="Feed names to run, in order"
    )

    @field_validator('enabled_feeds')
    @classmethod
    def known_feeds(cls, v):
        """Validate that every feed name is registered."""
        unknown = [name for name in v if name not in FEEDS]
        if unknown:
            raise ValueError(f"unknown feeds {unknown}; available: {sorted(FEEDS)}")
        return v


# ============================================================================
# Complete Application Configuration
# ============================================================================

class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(use_enum_values=True)

    system: SystemConfig = Field(
        default_factory=SystemConfig,
        description="System configuration"
    )

    engine: EngineConfig = Field(
        default_factory=EngineConfig,
        description="Decision engine configuration"
    )

    feeds: FeedConfig = Field(
        default_factory=FeedConfig,
        description="Feed configuration"
    )

"""Pydantic configuration models for the topology collector."""

from pydantic import BaseModel, Field, field_validator
from typing import List


class DirectorConfig(BaseModel):
    """Director the deployments are read from."""
    inventory_path: str  # YAML inventory replayed by the static director


class FiltersConfig(BaseModel):
    """Deployment selection."""
    deployments: List[str] = Field(default_factory=list)  # Empty means all deployments

    @field_validator('deployments')
    @classmethod
    def strip_names(cls, v: List[str]) -> List[str]:
        """Drop blank names left behind by unset environment variables."""
        return [name.strip() for name in v if name and name.strip()]


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError('Log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL')
        return level


class CollectorSystemConfig(BaseModel):
    """Root configuration model for the topology collector."""
    director: DirectorConfig
    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

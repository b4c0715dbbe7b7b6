"""
Application configuration.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError


class AppConfig(BaseModel):
    """Settings for a gradebook session."""

    rounding_digits: int = Field(2, ge=0, le=6)
    current_year: Optional[int] = Field(None, ge=1950, description="Fixed 'now' for year validation")
    random_seed: Optional[int] = Field(None, description="Seed for suggested referent IDs")
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Load configuration from a JSON file, or return the defaults."""
    if path is None:
        return AppConfig()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}",
                                 error_code="config_unreadable") from e
    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}",
                                 error_code="config_invalid",
                                 details={'errors': e.errors()}) from e

"""Configuration management for the decision matrix."""

from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from ..scorer.weights import DEFAULT_TEMPLATE, WEIGHT_TEMPLATES

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Config(BaseSettings):
    """Application configuration from environment variables."""

    default_template: str = DEFAULT_TEMPLATE
    weights_file: Optional[str] = None
    output_dir: str = "."
    log_level: str = "INFO"

    model_config = {"env_prefix": "DECISION_MATRIX_", "env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @field_validator("default_template")
    @classmethod
    def known_template(cls, v: str) -> str:
        if v not in WEIGHT_TEMPLATES:
            raise ValueError(f"unknown template '{v}', expected one of: {', '.join(WEIGHT_TEMPLATES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{v}'")
        return level


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError listing every invalid setting (not just the first one).
    """
    try:
        return Config()
    except ValidationError as exc:
        problems = "; ".join(
            f"DECISION_MATRIX_{'_'.join(str(p) for p in err['loc']).upper()}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValueError(f"Invalid configuration: {problems}") from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()

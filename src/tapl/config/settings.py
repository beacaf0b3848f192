"""Evaluation settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tapl.eval.strategy import Strategy


class EvalSettings(BaseSettings):
    """Evaluator and printer settings, read from TAPL_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TAPL_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    strategy: Strategy = Field(default=Strategy.FULL_REDUCTION)
    step_limit: int | None = Field(default=None, ge=1)
    fresh_name_suffix: str = Field(default="'", min_length=1)


def load_settings(**overrides) -> EvalSettings:
    """Load settings from the environment, with keyword overrides."""
    return EvalSettings(**overrides)

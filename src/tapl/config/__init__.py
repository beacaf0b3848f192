"""Configuration package."""

from tapl.config.settings import EvalSettings, load_settings

__all__ = [
    "EvalSettings",
    "load_settings",
]

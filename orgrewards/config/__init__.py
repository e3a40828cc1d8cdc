"""Configuration package."""

from orgrewards.config.settings import Settings, settings

__all__ = ["Settings", "settings"]

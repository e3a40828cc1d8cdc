"""
Utility functions for orgrewards.

Numeric coercion and presentation formatting.
"""

from orgrewards.utils.formatters import (
    format_currency,
    format_percentage,
    format_rank,
    format_reward_report,
)
from orgrewards.utils.numbers import normalize_name, to_decimal

__all__ = [
    "format_currency",
    "format_percentage",
    "format_rank",
    "format_reward_report",
    "normalize_name",
    "to_decimal",
]

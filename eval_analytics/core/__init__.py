"""
Core Package - Evaluation Analytics
eval_analytics/core/__init__.py

Core infrastructure: exceptions, logging setup.
"""

from eval_analytics.core.exceptions import (
    AnalyticsException,
    InvalidExpertiseException,
    InvalidLayoutException,
    ScoreRecordFormatException,
)
from eval_analytics.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "AnalyticsException",
    "InvalidExpertiseException",
    "InvalidLayoutException",
    "ScoreRecordFormatException",
]

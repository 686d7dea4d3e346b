"""
Custom Exceptions - Evaluation Analytics
eval_analytics/core/exceptions.py

Exception classes for invalid call arguments and malformed upstream records.
Placement failure in the word cloud and a missing user rating are normal
outcomes, not exceptions.
"""


class AnalyticsException(Exception):
    """Base exception for the analytics core."""

    pass


class InvalidLayoutException(AnalyticsException, ValueError):
    """Word cloud layout called with arguments it cannot honour."""

    def __init__(self, message: str, strategy: str = None):
        self.strategy = strategy
        self.message = message
        super().__init__(message)


class ScoreRecordFormatException(AnalyticsException, ValueError):
    """Upstream score record matches neither the array nor the object format."""

    def __init__(self, message: str, record_key: str = None):
        self.record_key = record_key
        self.message = message
        super().__init__(message)


class InvalidExpertiseException(AnalyticsException, ValueError):
    """Unknown expertise level in an evaluator profile."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Unknown {field} '{value}'")

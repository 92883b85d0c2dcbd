# DidYouMean - Errors
# ===================
"""
Exception types raised by the suggestion engine and its record stores.
"""

from typing import Optional


class DidYouMeanError(Exception):
    """Base exception for suggestion errors."""
    pass


class InvalidArgument(DidYouMeanError, ValueError):
    """Raised when a caller passes an unusable field spec or word."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid {argument}: {reason}")


class StoreQueryError(DidYouMeanError):
    """Raised by a record store when a query cannot be executed."""

    def __init__(self, table: str, reason: str, sql: Optional[str] = None):
        self.table = table
        self.reason = reason
        self.sql = sql
        message = f"Query against '{table}' failed: {reason}"
        if sql:
            message += f" (SQL: {sql})"
        super().__init__(message)

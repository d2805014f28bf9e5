"""
Custom exception classes for the LightBnB query service.
Store failures are raised as typed errors so callers can tell them apart from empty results.
"""

from typing import Optional


class QueryServiceError(Exception):
    """Base query service exception."""

    error_code = "QUERY_SERVICE_ERROR"

    def __init__(self, detail: str, operation: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.detail}"
        return self.detail


class StoreError(QueryServiceError):
    """The relational store failed to run a statement."""

    error_code = "DATABASE_ERROR"

    def __init__(self, detail: str = "Database operation failed", operation: Optional[str] = None):
        super().__init__(detail, operation)


class ConstraintViolationError(StoreError):
    """A table constraint (unique, foreign key, not null, check) rejected a write."""

    error_code = "INTEGRITY_ERROR"

    def __init__(
        self,
        detail: str = "Data integrity constraint violation",
        operation: Optional[str] = None,
        constraint: Optional[str] = None
    ):
        super().__init__(detail, operation)
        self.constraint = constraint


class StoreUnavailableError(StoreError):
    """The store could not be reached or no pooled connection was available."""

    error_code = "STORE_UNAVAILABLE"

    def __init__(self, detail: str = "Database temporarily unavailable", operation: Optional[str] = None):
        super().__init__(detail, operation)


class QueryExecutionError(StoreError):
    """The store rejected the statement itself."""

    error_code = "QUERY_ERROR"

    def __init__(self, detail: str = "Database statement failed", operation: Optional[str] = None):
        super().__init__(detail, operation)

"""
Utility modules for the LightBnB query service.
"""

from .exceptions import (
    QueryServiceError,
    StoreError,
    ConstraintViolationError,
    StoreUnavailableError,
    QueryExecutionError
)

__all__ = [
    # Exceptions
    "QueryServiceError",
    "StoreError",
    "ConstraintViolationError",
    "StoreUnavailableError",
    "QueryExecutionError",
]

"""
LightBnB data-access layer.
Parameterized user, reservation and property queries over a pooled PostgreSQL store.
"""

from lightbnb.services.query import QueryService
from lightbnb.utils.exceptions import (
    QueryServiceError,
    StoreError,
    ConstraintViolationError,
    StoreUnavailableError,
    QueryExecutionError
)

__version__ = "1.0.0"

__all__ = [
    "QueryService",
    "QueryServiceError",
    "StoreError",
    "ConstraintViolationError",
    "StoreUnavailableError",
    "QueryExecutionError",
]

"""
Service layer for the LightBnB query operations.
Contains the query service and store error handling.
"""

from .error_handler import ErrorHandlerService
from .query import QueryService

__all__ = [
    "ErrorHandlerService",
    "QueryService"
]

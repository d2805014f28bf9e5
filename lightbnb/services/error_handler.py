"""
Error handling service for consistent translation and logging of store failures.
Maps SQLAlchemy errors onto the typed query service exceptions.
"""

from typing import Optional
from sqlalchemy.exc import (
    SQLAlchemyError,
    DBAPIError,
    IntegrityError,
    OperationalError,
    InterfaceError,
    DisconnectionError,
    TimeoutError as PoolTimeoutError,
    StatementError,
)
from lightbnb.utils.exceptions import (
    StoreError,
    ConstraintViolationError,
    StoreUnavailableError,
    QueryExecutionError,
)
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Service for handling store errors consistently across query operations.
    Every translated error is logged once, with an error id to correlate reports.
    """

    @staticmethod
    def translate_database_error(
        exception: BaseException,
        operation: Optional[str] = None
    ) -> StoreError:
        """
        Translate a database exception into a typed store error.

        Args:
            exception: Exception raised while talking to the store
            operation: Name of the query service operation that failed

        Returns:
            StoreError subclass describing the failure
        """
        error_id = ErrorHandlerService._generate_error_id()

        if isinstance(exception, IntegrityError):
            constraint = ErrorHandlerService._extract_constraint_info(exception)
            message = "Data integrity constraint violation"
            if constraint:
                message = f"Constraint violation: {constraint}"
            error = ConstraintViolationError(message, operation=operation, constraint=constraint)
        elif ErrorHandlerService._is_connectivity_error(exception):
            error = StoreUnavailableError(operation=operation)
        elif isinstance(exception, (DBAPIError, StatementError)):
            error = QueryExecutionError(operation=operation)
        else:
            error = StoreError(operation=operation)

        logger.error(
            f"Database Error [{error_id}]: {error.error_code} in {operation or 'unknown operation'} - {exception}",
            extra={
                "error_code": error.error_code,
                "error_id": error_id,
                "operation": operation,
                "exception_type": type(exception).__name__
            },
            exc_info=exception
        )
        return error

    @staticmethod
    def is_database_error(exception: BaseException) -> bool:
        """Check whether an exception originates from the store or its driver."""
        return isinstance(exception, (SQLAlchemyError, OSError))

    @staticmethod
    def _is_connectivity_error(exception: BaseException) -> bool:
        """Check whether an exception means the store could not be reached."""
        if isinstance(exception, (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError, OSError)):
            return True
        return isinstance(exception, DBAPIError) and exception.connection_invalidated

    @staticmethod
    def _generate_error_id() -> str:
        """Generate a short unique id for error tracking."""
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _extract_constraint_info(exception: IntegrityError) -> Optional[str]:
        """
        Extract constraint information from integrity error.

        Args:
            exception: SQLAlchemy integrity error

        Returns:
            Constraint information string or None
        """
        error_msg = str(exception.orig).lower()

        # Common constraint patterns across PostgreSQL and SQLite messages
        if "unique constraint" in error_msg:
            return "Duplicate value for unique field"
        elif "foreign key constraint" in error_msg:
            return "Referenced record does not exist"
        elif "not null constraint" in error_msg or "null value in column" in error_msg:
            return "Required field cannot be empty"
        elif "check constraint" in error_msg:
            return "Value does not meet validation requirements"

        return None

"""
Query service exposing the LightBnB data-access operations.

Each operation opens its own session from the injected session factory, so a pooled
connection is held only for the duration of one statement and is released on success,
on failure and on cancellation. Store failures surface as typed StoreError subclasses;
a missing single record is None and an empty search is an empty list.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Mapping, Optional, Union
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from lightbnb.config import Settings, get_settings
from lightbnb.database import create_database_engine, create_session_factory, close_db_connection
from lightbnb.repositories.filters import build_property_filters
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertySearchOptions,
    PropertyWithRating,
)
from lightbnb.schemas.reservation import ReservationWithProperty
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.services.error_handler import ErrorHandlerService
import logging

logger = logging.getLogger(__name__)


class QueryService:
    """
    Stateless query layer over a pooled relational store.
    The pool is injected through the session factory; the service never holds a session between calls.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        default_limit: int = 10,
        engine: Optional[AsyncEngine] = None
    ):
        """
        Initialize the service with its connection provider.

        Args:
            session_factory: Factory producing sessions bound to the pooled engine
            default_limit: Row cap used when an operation is called without a limit
            engine: Engine owned by this service, disposed by close(); None when the caller owns it
        """
        self.session_factory = session_factory
        self.default_limit = default_limit
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "QueryService":
        """Build a service that owns a new engine created from settings."""
        settings = settings or get_settings()
        engine = create_database_engine(settings)
        return cls(
            create_session_factory(engine),
            default_limit=settings.default_result_limit,
            engine=engine
        )

    async def close(self) -> None:
        """Dispose of the owned engine, if any."""
        if self._engine is not None:
            await close_db_connection(self._engine)
            self._engine = None

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session for one operation and translate store failures."""
        try:
            async with self.session_factory() as session:
                yield session
        except Exception as e:
            if ErrorHandlerService.is_database_error(e):
                raise ErrorHandlerService.translate_database_error(e, operation) from e
            raise

    def _resolve_limit(self, limit: Optional[int]) -> int:
        return self.default_limit if limit is None else limit

    # Users

    async def get_user_with_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a single user by exact email.

        Returns:
            The user, or None when no user has that email
        """
        async with self._session("get_user_with_email") as session:
            user = await UserRepository(session).get_by_email(email)
            return UserRecord.model_validate(user) if user else None

    async def get_user_with_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Get a single user by id.

        Returns:
            The user, or None when no user has that id
        """
        async with self._session("get_user_with_id") as session:
            user = await UserRepository(session).get_by_id(user_id)
            return UserRecord.model_validate(user) if user else None

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> UserRecord:
        """
        Add a new user.

        Args:
            user: name, email and password

        Returns:
            The created user including its generated id

        Raises:
            pydantic.ValidationError: If a field is missing or mistyped
            ConstraintViolationError: If the email is already registered
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(dict(user))

        async with self._session("add_user") as session:
            created = await UserRepository(session).create_user(user)
            return UserRecord.model_validate(created)

    # Reservations

    async def get_all_reservations(
        self,
        guest_id: int,
        limit: Optional[int] = None
    ) -> List[ReservationWithProperty]:
        """
        Get past reservations of a guest with property details and average rating.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations, defaults to the service default

        Returns:
            Reservations that ended before today, earliest start date first
        """
        limit = self._resolve_limit(limit)

        async with self._session("get_all_reservations") as session:
            rows = await ReservationRepository(session).get_past_reservations(guest_id, limit)

        reservations = []
        for reservation, property_obj, average_rating in rows:
            record = ReservationWithProperty(
                id=reservation.id,
                property_id=reservation.property_id,
                guest_id=reservation.guest_id,
                start_date=reservation.start_date,
                end_date=reservation.end_date,
                property=PropertyRecord.model_validate(property_obj),
                average_rating=average_rating
            )
            reservations.append(record)

        logger.debug(f"Returning {len(reservations)} reservations for guest {guest_id}")
        return reservations

    # Properties

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyWithRating]:
        """
        Search properties.

        Args:
            options: Optional filters (city, owner_id, minimum_price_per_night,
                     maximum_price_per_night, minimum_rating)
            limit: Maximum number of properties, defaults to the service default

        Returns:
            Matching properties with their average rating, cheapest first
        """
        limit = self._resolve_limit(limit)
        filters = build_property_filters(options)

        async with self._session("get_all_properties") as session:
            rows = await PropertyRepository(session).search_properties(filters, limit)

        return [
            PropertyWithRating(
                **PropertyRecord.model_validate(property_obj).model_dump(),
                average_rating=average_rating
            )
            for property_obj, average_rating in rows
        ]

    async def add_property(self, property: Union[PropertyCreate, Mapping[str, Any]]) -> PropertyRecord:
        """
        Add a property listing.

        Args:
            property: The fourteen property fields

        Returns:
            The created property including its generated id and default columns

        Raises:
            pydantic.ValidationError: If a field is missing or mistyped
            ConstraintViolationError: If the owner does not exist
        """
        if not isinstance(property, PropertyCreate):
            property = PropertyCreate.model_validate(dict(property))

        async with self._session("add_property") as session:
            created = await PropertyRepository(session).create_property(property)
            return PropertyRecord.model_validate(created)

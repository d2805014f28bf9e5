"""
Test configuration and fixtures for the LightBnB query service.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
import os
from datetime import date, datetime, timedelta, timezone
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from lightbnb.config import Settings
from lightbnb.database import create_database_engine, create_session_factory, create_tables, drop_tables
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate
from lightbnb.services.query import QueryService


# Test database configuration
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///:memory:"
)


def utc_today() -> date:
    """Current date as the store sees it (CURRENT_DATE is UTC for SQLite)."""
    return datetime.now(timezone.utc).date()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the test database."""
    return Settings(environment="testing", database_url=TEST_DATABASE_URL)


@pytest.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh schema for every test."""
    engine = create_database_engine(test_settings)
    await create_tables(engine)
    yield engine
    await drop_tables(engine, test_settings)
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine):
    """Session factory bound to the test engine."""
    return create_session_factory(engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


# Service fixtures
@pytest.fixture
def query_service(session_factory) -> QueryService:
    """Create a query service over the test pool."""
    return QueryService(session_factory)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: str = None,
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
        name: str = "Test User"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        user_data = UserFactory.create_user_data(**kwargs)
        return await user_repo.create_user(UserCreate(**user_data))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        description: str = "A cosy test property",
        cost_per_night: int = 10000,
        parking_spaces: int = 1,
        number_of_bathrooms: int = 1,
        number_of_bedrooms: int = 2,
        city: str = "Test City",
        country: str = "Canada",
        street: str = "1 Test Street",
        province: str = "British Columbia",
        post_code: str = "V5K 0A1"
    ) -> dict:
        """Create property data dictionary with all fourteen fields."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": description,
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": parking_spaces,
            "number_of_bathrooms": number_of_bathrooms,
            "number_of_bedrooms": number_of_bedrooms,
            "country": country,
            "street": street,
            "city": city,
            "province": province,
            "post_code": post_code
        }

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> Property:
        """Create a test property in the database."""
        property_data = PropertyFactory.create_property_data(owner_id=owner_id, **kwargs)
        return await property_repo.create_property(PropertyCreate(**property_data))


class ReservationFactory:
    """Factory for creating test reservations directly through a session."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        start_date: date = date(2018, 9, 11),
        end_date: Optional[date] = None
    ) -> Reservation:
        """Create a test reservation; ends a week after it starts unless given."""
        reservation = Reservation(
            property_id=property_id,
            guest_id=guest_id,
            start_date=start_date,
            end_date=end_date or start_date + timedelta(days=7)
        )
        session.add(reservation)
        await session.commit()
        await session.refresh(reservation)
        return reservation


class ReviewFactory:
    """Factory for creating test property reviews."""

    @staticmethod
    async def create_review(
        session: AsyncSession,
        reservation: Reservation,
        rating: int,
        message: str = "message"
    ) -> PropertyReview:
        """Create a review left by the reservation's guest."""
        review = PropertyReview(
            guest_id=reservation.guest_id,
            property_id=reservation.property_id,
            reservation_id=reservation.id,
            rating=rating,
            message=message
        )
        session.add(review)
        await session.commit()
        await session.refresh(review)
        return review

    @staticmethod
    async def rate_property(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        ratings: list
    ) -> None:
        """Leave one past reservation and one review per rating on a property."""
        for offset, rating in enumerate(ratings):
            reservation = await ReservationFactory.create_reservation(
                session,
                property_id=property_id,
                guest_id=guest_id,
                start_date=date(2017, 1, 1) + timedelta(days=30 * offset)
            )
            await ReviewFactory.create_review(session, reservation, rating)


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a test property owner."""
    return await UserFactory.create_user(
        user_repository,
        email="owner@test.com",
        name="Test Owner"
    )


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a test guest."""
    return await UserFactory.create_user(
        user_repository,
        email="guest@test.com",
        name="Test Guest"
    )


@pytest.fixture
async def test_property(property_repository: PropertyRepository, test_owner: User) -> Property:
    """Create a test property."""
    return await PropertyFactory.create_property(
        property_repository,
        owner_id=test_owner.id,
        title="Test Property",
        cost_per_night=15000,
        city="Vancouver"
    )


@pytest.fixture
async def search_catalogue(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    user_repository: UserRepository,
    test_owner: User,
    test_guest: User
) -> dict:
    """
    Create a small catalogue of rated properties keyed by title.

    Two owners, three cities, prices between 40 and 300 and averages from 2.0 to 5.0;
    one property has no reviews.
    """
    other_owner = await UserFactory.create_user(user_repository, email="other@test.com", name="Other Owner")

    catalogue = [
        ("Cheap Vancouver", test_owner.id, "Vancouver", 40, [5, 4]),
        ("Mid Vancouver", test_owner.id, "North Vancouver", 100, [4, 5, 4]),
        ("Pricey Vancouver", other_owner.id, "Vancouver", 300, [5]),
        ("Low Rated Vancouver", test_owner.id, "Vancouver", 120, [2, 2]),
        ("Calgary Loft", test_owner.id, "Calgary", 150, [5, 5]),
        ("Unreviewed Toronto", other_owner.id, "Toronto", 50, []),
    ]

    properties = {}
    for title, owner_id, city, cost, ratings in catalogue:
        property_obj = await PropertyFactory.create_property(
            property_repository,
            owner_id=owner_id,
            title=title,
            city=city,
            cost_per_night=cost
        )
        await ReviewFactory.rate_property(db_session, property_obj.id, test_guest.id, ratings)
        properties[title] = property_obj

    properties["other_owner"] = other_owner
    return properties


# Utility functions for tests
def assert_user_equal(user1, user2):
    """Assert that two users (models or records) are equal."""
    assert user1.id == user2.id
    assert user1.name == user2.name
    assert user1.email == user2.email
    assert user1.password == user2.password


def assert_property_fields(record, property_data: dict):
    """Assert that a property record echoes every input field."""
    for field, value in property_data.items():
        assert getattr(record, field) == value, field

"""
Repository layer for data access operations.
Builds parameterized statements per table and runs them on an injected session.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.filters import PredicateAccumulator, build_property_filters
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "PredicateAccumulator",
    "build_property_filters",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository"
]

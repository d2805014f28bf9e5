"""
Pydantic schemas for query service inputs and results.
"""

# User schemas
from .user import (
    UserBase,
    UserCreate,
    UserRecord
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyRecord,
    PropertyWithRating,
    PropertySearchOptions
)

# Reservation schemas
from .reservation import (
    ReservationRecord,
    ReservationWithProperty
)

__all__ = [
    # User
    "UserBase",
    "UserCreate",
    "UserRecord",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyRecord",
    "PropertyWithRating",
    "PropertySearchOptions",

    # Reservation
    "ReservationRecord",
    "ReservationWithProperty"
]

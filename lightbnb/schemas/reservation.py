"""
Pydantic schemas for reservation records returned by past-reservation lookups.
"""

from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import Optional
from lightbnb.schemas.property import PropertyRecord


class ReservationRecord(BaseModel):
    """A row of the reservations table."""

    id: int
    property_id: int
    guest_id: int
    start_date: date
    end_date: date

    model_config = ConfigDict(from_attributes=True)


class ReservationWithProperty(ReservationRecord):
    """Reservation joined with its property and that property's mean review rating."""

    property: PropertyRecord
    average_rating: Optional[float] = None

"""
Reservation repository for a guest's past stays.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, asc
from lightbnb.repositories.base import BaseRepository, validate_limit
from lightbnb.repositories.filters import average_rating_expression
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from typing import Optional, List, Tuple
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Read-only repository for reservations joined with their properties."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    def build_past_reservations_query(self, guest_id: int, limit: int):
        """
        Build the statement for a guest's completed reservations.

        Grouping by (property, reservation) keeps one row per reservation despite
        the review join fan-out.
        """
        return (
            select(Reservation, Property, average_rating_expression().label("average_rating"))
            .join(Property, Property.id == Reservation.property_id)
            .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
            .where(
                Reservation.guest_id == guest_id,
                Reservation.end_date < func.current_date()
            )
            .group_by(Property.id, Reservation.id)
            .order_by(asc(Reservation.start_date), asc(Reservation.id))
            .limit(limit)
        )

    async def get_past_reservations(
        self,
        guest_id: int,
        limit: int = 10
    ) -> List[Tuple[Reservation, Property, Optional[float]]]:
        """
        Get reservations of a guest that ended before today.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of records to return

        Returns:
            List of (reservation, property, average rating) ordered by start date
        """
        validate_limit(limit)
        query = self.build_past_reservations_query(guest_id, limit)

        try:
            result = await self.db.execute(query)
            rows = [(row[0], row[1], row[2]) for row in result.all()]

            logger.debug(f"Retrieved {len(rows)} past reservations for guest {guest_id}")
            return rows
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise

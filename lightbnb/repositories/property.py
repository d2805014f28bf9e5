"""
Property repository for listing creation and filtered search.
Search results carry the mean review rating of each property.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, asc
from lightbnb.repositories.base import BaseRepository, validate_limit
from lightbnb.repositories.filters import PredicateAccumulator, average_rating_expression
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertyCreate
from typing import Optional, List, Tuple
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings with optional-filter search.
    Reviews are outer-joined and grouped per property so unreviewed listings are still returned.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: PropertyCreate) -> Property:
        """
        Create a new property listing.

        Args:
            property_data: The fourteen required property fields

        Returns:
            Created property instance including id and default columns

        Raises:
            IntegrityError: If the owner does not exist or a column constraint fails
        """
        created_property = await self.create(property_data.model_dump())
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property

    def build_search_query(self, filters: PredicateAccumulator, limit: int):
        """
        Build the rated property search statement.

        Args:
            filters: Accumulated search conditions
            limit: Maximum number of rows, bound as a parameter

        Returns:
            Select yielding (Property, average_rating) rows, cheapest first
        """
        query = (
            select(Property, average_rating_expression().label("average_rating"))
            .outerjoin(PropertyReview, Property.id == PropertyReview.property_id)
            .group_by(Property.id)
        )

        query = filters.apply(query)

        # Property id breaks price ties so repeated searches return a stable order
        return query.order_by(asc(Property.cost_per_night), asc(Property.id)).limit(limit)

    async def search_properties(
        self,
        filters: Optional[PredicateAccumulator] = None,
        limit: int = 10
    ) -> List[Tuple[Property, Optional[float]]]:
        """
        Search properties with optional filters.

        Args:
            filters: Accumulated conditions; None searches all properties
            limit: Maximum number of records to return

        Returns:
            List of (property, average rating) pairs ordered by cost per night
        """
        validate_limit(limit)
        query = self.build_search_query(filters or PredicateAccumulator(), limit)

        try:
            result = await self.db.execute(query)
            rows = [(row[0], row[1]) for row in result.all()]

            logger.debug(f"Property search returned {len(rows)} results (limit {limit})")
            return rows
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise

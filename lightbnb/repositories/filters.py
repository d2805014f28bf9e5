"""
Predicate accumulator for optional search filters.
Collects row-level and aggregate-level conditions and applies each group to a
statement once, so the WHERE and HAVING keywords are emitted by SQLAlchemy exactly once.
"""

from sqlalchemy import Select, and_, func, Float
from sqlalchemy.sql.elements import ColumnElement
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchOptions
from typing import List, Any, Mapping, Union
import logging

logger = logging.getLogger(__name__)


def average_rating_expression() -> ColumnElement:
    """Mean review rating per group, typed as float so bound thresholds are floats."""
    return func.avg(PropertyReview.rating, type_=Float)


class PredicateAccumulator:
    """
    Incrementally built filter clause.

    Conditions are kept as SQLAlchemy expressions, so every compared value travels
    as a bound parameter. `where` conditions filter joined rows before grouping;
    `having` conditions filter computed aggregates after grouping.
    """

    def __init__(self):
        self.where: List[ColumnElement] = []
        self.having: List[ColumnElement] = []

    def add_where(self, condition: ColumnElement) -> "PredicateAccumulator":
        self.where.append(condition)
        return self

    def add_having(self, condition: ColumnElement) -> "PredicateAccumulator":
        self.having.append(condition)
        return self

    def __len__(self) -> int:
        return len(self.where) + len(self.having)

    def __bool__(self) -> bool:
        return len(self) > 0

    def apply(self, query: Select) -> Select:
        """
        Attach the accumulated conditions to a statement.

        Args:
            query: Statement to filter; must already be grouped if any having condition exists

        Returns:
            The filtered statement
        """
        if self.where:
            query = query.where(and_(*self.where))
        if self.having:
            query = query.having(and_(*self.having))
        return query


def build_property_filters(
    options: Union[PropertySearchOptions, Mapping[str, Any], None]
) -> PredicateAccumulator:
    """
    Build the property search conditions from sparse filter options.

    Args:
        options: PropertySearchOptions instance, a plain mapping of the same fields, or None

    Returns:
        PredicateAccumulator holding one condition per present filter
    """
    if options is None:
        options = PropertySearchOptions()
    elif not isinstance(options, PropertySearchOptions):
        options = PropertySearchOptions.model_validate(dict(options))

    filters = PredicateAccumulator()

    # City filter (literal substring, wildcards in the value are escaped)
    if options.city is not None:
        filters.add_where(Property.city.contains(options.city, autoescape=True))

    # Owner filter
    if options.owner_id is not None:
        filters.add_where(Property.owner_id == options.owner_id)

    # Nightly price range filters (inclusive)
    if options.minimum_price_per_night is not None:
        filters.add_where(Property.cost_per_night >= options.minimum_price_per_night)
    if options.maximum_price_per_night is not None:
        filters.add_where(Property.cost_per_night <= options.maximum_price_per_night)

    # Rating filter applies to the per-property average, after grouping
    if options.minimum_rating is not None:
        filters.add_having(average_rating_expression() >= options.minimum_rating)

    logger.debug(
        f"Built property filters: {len(filters.where)} row conditions, "
        f"{len(filters.having)} aggregate conditions"
    )
    return filters

"""
Property review model. Ratings are only ever read back as per-property averages.
"""

from sqlalchemy import SmallInteger, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class PropertyReview(Base):
    """Guest review of a property left for a specific reservation."""

    __tablename__ = "property_reviews"

    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[int] = mapped_column(
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False
    )

    rating: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=0,
        comment="Star rating given by the guest"
    )

    message: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"

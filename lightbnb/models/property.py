"""
Property model for vacation-rental listings.
Handles listing data with location, nightly pricing and ownership.
"""

from sqlalchemy import String, Text, Integer, Boolean, Index, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class Property(Base):
    """
    Property model for rental listings.
    All fourteen descriptive columns are required on insert; `active` defaults to true.
    """

    __tablename__ = "properties"

    # Foreign key to the owning user
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Basic listing information
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Listing description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    cover_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    # Pricing and specifications
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly cost in the smallest currency unit"
    )

    parking_spaces: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0
    )

    number_of_bathrooms: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0
    )

    number_of_bedrooms: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0
    )

    # Location information
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
        comment="Whether the listing is active"
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"


# Composite index for owner listings ordered by price
owner_cost_index = Index(
    'idx_properties_owner_cost',
    Property.owner_id,
    Property.cost_per_night
)

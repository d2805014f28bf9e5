"""
Reservation model linking a guest to a property for a date range.
"""

from sqlalchemy import Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from datetime import date


class Reservation(Base):
    """Reservation of a property by a guest. Read-only for the query service."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="First night of the stay"
    )

    end_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Check-out date"
    )

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, property_id={self.property_id}, "
            f"guest_id={self.guest_id}, {self.start_date}..{self.end_date})>"
        )


# Past-reservation lookups filter by guest and end date together
guest_end_date_index = Index(
    'idx_reservations_guest_end_date',
    Reservation.guest_id,
    Reservation.end_date
)

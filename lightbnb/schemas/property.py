"""
Pydantic schemas for property records and search options.
Handles property creation, search filters and rated search results.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional


class PropertyBase(BaseModel):
    """The fourteen caller-supplied property columns, all required."""

    owner_id: int = Field(..., description="ID of the owning user")
    title: str = Field(..., max_length=255)
    description: str
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: int = Field(..., description="Nightly cost in the smallest currency unit")
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str = Field(..., max_length=255)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 93061,
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8,
                "country": "Canada",
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142"
            }
        }
    )


class PropertyRecord(PropertyBase):
    """A row of the properties table, including generated and default columns."""

    id: int
    active: bool = True

    model_config = ConfigDict(from_attributes=True)


class PropertyWithRating(PropertyRecord):
    """Property search result carrying the mean review rating (None when unreviewed)."""

    average_rating: Optional[float] = None


class PropertySearchOptions(BaseModel):
    """
    Sparse filter record for property search.
    Every field is optional; blank strings from form input count as absent.
    """

    city: Optional[str] = Field(None, description="Substring of the property city")
    owner_id: Optional[int] = Field(None, description="Exact owner match")
    minimum_price_per_night: Optional[int] = Field(None, description="Inclusive lower bound on cost_per_night")
    maximum_price_per_night: Optional[int] = Field(None, description="Inclusive upper bound on cost_per_night")
    minimum_rating: Optional[float] = Field(None, ge=0, description="Inclusive lower bound on the average rating")

    @model_validator(mode='before')
    @classmethod
    def drop_blank_values(cls, data):
        """Treat empty strings as missing filters."""
        if isinstance(data, dict):
            return {
                key: value for key, value in data.items()
                if not (isinstance(value, str) and not value.strip())
            }
        return data

    @model_validator(mode='after')
    def validate_price_range(self):
        """Validate that the price bounds do not cross."""
        if (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
            and self.minimum_price_per_night > self.maximum_price_per_night
        ):
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self

"""
Pydantic schemas for user records.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(..., max_length=255, description="User's display name")
    email: str = Field(..., max_length=255, description="User's email address")


class UserCreate(UserBase):
    """Schema for creating a new user. The password is stored exactly as given."""

    password: str = Field(..., max_length=255, description="Password hash produced by the caller")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Devin Sanders",
                "email": "tristanjacobs@gmail.com",
                "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
            }
        }
    )


class UserRecord(UserCreate):
    """A row of the users table."""

    id: int

    model_config = ConfigDict(from_attributes=True)

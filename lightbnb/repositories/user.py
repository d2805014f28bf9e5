"""
User repository for user lookup and creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user records.
    Email uniqueness is left to the table constraint; no pre-check is made.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: UserCreate) -> User:
        """
        Insert a user with the given name, email and password.

        Args:
            user_data: Validated user fields

        Returns:
            Created user instance with its generated id

        Raises:
            IntegrityError: If the email is already registered
        """
        created_user = await self.create(user_data.model_dump())
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by exact email address.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("email", email)

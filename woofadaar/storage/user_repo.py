"""
User Repository - plain CRUD for the User model.

Business rules (multipliers, levels) live in core/domain.
"""

from datetime import date

from woofadaar.database.models import User


async def get_user(user_id: int) -> User | None:
    """Get user by id."""
    return await User.get_or_none(id=user_id)


async def get_user_by_email(email: str) -> User | None:
    return await User.get_or_none(email=email)


async def create_user(
    email: str,
    joined_on: date | None = None,
    **fields,
) -> User:
    """Create a user; joined_on defaults to today."""
    return await User.create(
        email=email, joined_on=joined_on or date.today(), **fields
    )

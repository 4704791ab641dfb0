"""
Achievement Repository - unlocked achievements per user.
"""

from tortoise.backends.base.client import BaseDBAsyncClient

from woofadaar.database.models import User, UserAchievement


async def get_unlocked_ids(user: User) -> set[str]:
    """Ids of every achievement the user holds (standalone and chain levels)."""
    ids = await UserAchievement.filter(user=user).values_list(
        "achievement_id", flat=True
    )
    return set(ids)


async def unlock(
    user: User,
    achievement_id: str,
    chain_id: str | None = None,
    is_hidden: bool = False,
    using_db: BaseDBAsyncClient | None = None,
) -> bool:
    """
    Record an unlock.

    Returns:
        True if newly unlocked, False if the user already had it
    """
    _, created = await UserAchievement.get_or_create(
        user=user,
        achievement_id=achievement_id,
        defaults={"chain_id": chain_id, "is_hidden": is_hidden},
        using_db=using_db,
    )
    return created


async def list_achievements(user: User) -> list[UserAchievement]:
    return await UserAchievement.filter(user=user).order_by("unlocked_at", "id")

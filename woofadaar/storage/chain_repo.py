"""
Chain Progress Repository - current level per (user, chain).

Levels are only ever raised: advance() is a conditional update on
current_level < new_level.
"""

from datetime import datetime, timezone

from tortoise.backends.base.client import BaseDBAsyncClient

from woofadaar.database.models import User, UserChainProgress


async def get_levels(user: User) -> dict[str, int]:
    """chain_id -> current level."""
    rows = await UserChainProgress.filter(user=user).values_list(
        "chain_id", "current_level"
    )
    return {chain_id: level for chain_id, level in rows}


async def get_progress(user: User, chain_id: str) -> UserChainProgress | None:
    return await UserChainProgress.get_or_none(user=user, chain_id=chain_id)


async def advance(
    user: User,
    chain_id: str,
    new_level: int,
    completed: bool = False,
    using_db: BaseDBAsyncClient | None = None,
) -> bool:
    """
    Raise the stored level to new_level.

    Returns:
        True if the level was raised, False if it was already >= new_level
    """
    progress, _ = await UserChainProgress.get_or_create(
        user=user, chain_id=chain_id, using_db=using_db
    )

    updates: dict = {"current_level": new_level}
    if completed:
        updates["completed_at"] = datetime.now(timezone.utc)

    query = UserChainProgress.filter(id=progress.id, current_level__lt=new_level)
    if using_db is not None:
        query = query.using_db(using_db)
    updated = await query.update(**updates)
    return updated > 0

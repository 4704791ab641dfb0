"""
Inspect a user's gamification data.
Run: python -m woofadaar.scripts.check_user <user_id>
"""

import asyncio
import logging
import sys

from tortoise import Tortoise

from woofadaar.config import config
from woofadaar.core.domain.catalog import get_catalog
from woofadaar.core.use_cases.gamification_summary import GamificationSummaryUseCase
from woofadaar.database.config import TORTOISE_ORM
from woofadaar.storage import user_repo


async def check_user(user_id: int):
    await Tortoise.init(config=TORTOISE_ORM)

    try:
        user = await user_repo.get_user(user_id)

        if not user:
            print(f"❌ User {user_id} not found.")
            return

        catalog = get_catalog()
        summary = await GamificationSummaryUseCase(catalog).execute(user)

        print(f"👤 User: {user.name} <{user.email}>")
        print(
            f"   Points: {summary.total_lifetime_points} lifetime, "
            f"{summary.current_balance} balance"
        )
        print(
            f"   Level: {summary.level} ({summary.level_progress}%, "
            f"{summary.points_to_next_level} to next)"
        )

        print(f"\n🏅 Achievements: {len(summary.achievements)}")
        for achievement_id in summary.achievements:
            achievement = catalog.achievement_by_id(achievement_id)
            print(f"   {achievement.icon} {achievement.name} ({achievement.rarity.value})")

        if summary.hidden_discovered:
            print(f"\n🔮 Hidden discovered: {', '.join(summary.hidden_discovered)}")

        print(f"\n⛓️ Chains: {len(summary.chains)}")
        for status in summary.chains:
            state = "completed" if status.completed else "in progress"
            print(
                f"   - {status.chain_id}: level {status.current_level}/"
                f"{status.total_levels} ({state})"
            )

    finally:
        await Tortoise.close_connections()


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if len(sys.argv) < 2:
        print("Usage: python -m woofadaar.scripts.check_user <user_id>")
        sys.exit(1)
    asyncio.run(check_user(int(sys.argv[1])))

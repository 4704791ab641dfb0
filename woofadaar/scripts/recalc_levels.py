"""
Recalculate stored levels from lifetime points.
Run: python -m woofadaar.scripts.recalc_levels

Needed after the level thresholds in the catalog change.
"""

import asyncio
import logging

from tortoise import Tortoise

from woofadaar.config import config
from woofadaar.core.domain.catalog import get_catalog
from woofadaar.core.domain.levels import resolve_level
from woofadaar.database.config import TORTOISE_ORM
from woofadaar.storage import points_repo

logger = logging.getLogger(__name__)


async def recalculate_levels(dry_run: bool = False) -> int:
    """
    Recalculate every UserPoints.level.

    Returns:
        Number of rows whose level changed
    """
    thresholds = get_catalog().level_thresholds
    changed = 0

    async for row in points_repo.list_points():
        level = resolve_level(row.total_lifetime_points, thresholds).level
        if level == row.level:
            continue

        logger.info(
            f"User {row.user_id}: level {row.level} -> {level} "
            f"({row.total_lifetime_points} points)"
        )
        if not dry_run:
            await points_repo.set_level(row, level)
        changed += 1

    return changed


async def main(dry_run: bool = False) -> None:
    await Tortoise.init(config=TORTOISE_ORM)
    try:
        changed = await recalculate_levels(dry_run=dry_run)
        print(f"\nDone! {changed} level(s) {'would change' if dry_run else 'updated'}")
    finally:
        await Tortoise.close_connections()


if __name__ == "__main__":
    import sys

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(main(dry_run="--dry-run" in sys.argv[1:]))

"""Tests for the level recalculation script."""

import pytest

from woofadaar.database.models import UserPoints
from woofadaar.scripts.recalc_levels import recalculate_levels


@pytest.mark.asyncio
async def test_recalculate_levels(user):
    await UserPoints.create(user=user, total_lifetime_points=300, level=1)

    assert await recalculate_levels(dry_run=True) == 1
    assert (await UserPoints.get(user=user)).level == 1

    assert await recalculate_levels() == 1
    assert (await UserPoints.get(user=user)).level == 3

    assert await recalculate_levels() == 0

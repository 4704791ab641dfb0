import os
import sys
from datetime import date

import pytest
import pytest_asyncio
from tortoise import Tortoise

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def small_catalog_data() -> dict:
    """Minimal catalog used by tests that need predictable definitions."""
    return {
        "actions": {"questionPost": 10, "bestAnswer": 50, "commentPost": 5},
        "action_descriptions": {"bestAnswer": "Answer marked as best by community"},
        "level_thresholds": [0, 100, 250, 500, 1000],
        "achievements": [
            {
                "id": "firstPost",
                "name": "First Post",
                "category": "community",
                "condition": {"type": "count", "target": 1, "metric": "totalPosts"},
            },
            {
                "id": "helper",
                "name": "Helper",
                "category": "community",
                "condition": {"type": "count", "target": 10, "metric": "helpfulVotes"},
                "rarity": "rare",
                "points_reward": 40,
            },
            {
                "id": "night_owl",
                "name": "Night Owl",
                "category": "behavior",
                "condition": {"type": "count", "target": 10, "metric": "nightDays"},
                "hidden": True,
                "discovery_hint": "Some conversations happen when most are sleeping...",
                "points_reward": 200,
            },
        ],
        "chains": [
            {
                "id": "contributor",
                "name": "Community Contributor",
                "category": "community",
                "total_levels": 5,
                "levels": [
                    {
                        "id": f"contributor_{n}",
                        "level": n,
                        "name": f"Contributor {n}",
                        "category": "community",
                        "condition": {
                            "type": "count",
                            "target": target,
                            "metric": "totalPosts",
                        },
                        "points_reward": 10 * n,
                    }
                    for n, target in enumerate([1, 5, 10, 25, 50], start=1)
                ],
            }
        ],
    }


@pytest.fixture
def catalog_data() -> dict:
    """Fresh raw catalog dict, safe to mutate."""
    return small_catalog_data()


@pytest.fixture
def catalog(catalog_data):
    from woofadaar.core.domain.catalog import load_catalog

    return load_catalog(catalog_data)


@pytest.fixture
def default_catalog():
    from woofadaar.core.domain.catalog import load_catalog
    from woofadaar.core.domain.catalog_data import DEFAULT_CATALOG

    return load_catalog(DEFAULT_CATALOG)


@pytest_asyncio.fixture(scope="function")
async def db() -> None:
    """Lightweight in-memory DB per test."""
    await Tortoise.init(
        db_url="sqlite://:memory:", modules={"models": ["woofadaar.database.models"]}
    )
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def user(db):
    """Create a long-standing test user (no new-user bonus)."""
    from woofadaar.database.models import User

    user = await User.create(
        email="parent@example.com",
        name="Test Parent",
        joined_on=date(2023, 1, 1),
    )
    return user

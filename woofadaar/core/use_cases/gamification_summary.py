"""
Gamification Summary Use Case - read-only overview of a user's progress.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from woofadaar.core.domain.achievements import ChainStatus, chain_status, discovery_hints
from woofadaar.core.domain.catalog import GamificationCatalog, get_catalog
from woofadaar.core.domain.levels import level_progress, resolve_level
from woofadaar.database.models import User
from woofadaar.storage import achievement_repo, chain_repo, points_repo


@dataclass
class GamificationSummary:
    total_lifetime_points: int
    current_balance: int
    level: int
    points_to_next_level: int
    level_progress: float
    achievements: list[str] = field(default_factory=list)
    hidden_discovered: list[str] = field(default_factory=list)
    chains: list[ChainStatus] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)


class GamificationSummaryUseCase:
    """Use-case for building a user's gamification overview."""

    def __init__(self, catalog: GamificationCatalog | None = None):
        self.catalog = catalog or get_catalog()

    async def execute(
        self, user: User, stats: Mapping[str, Any] | None = None
    ) -> GamificationSummary:
        """
        Build the summary.

        Args:
            user: User
            stats: optional snapshot, needed for chain progress and hints

        Returns:
            GamificationSummary
        """
        stats = stats or {}
        thresholds = self.catalog.level_thresholds

        points = await points_repo.get_points(user)
        total = points.total_lifetime_points if points else 0
        balance = points.current_balance if points else 0
        level = resolve_level(total, thresholds)

        unlocked = await achievement_repo.get_unlocked_ids(user)
        chain_levels = await chain_repo.get_levels(user)

        visible, hidden = [], []
        for achievement in self.catalog.achievements:
            if achievement.id not in unlocked:
                continue
            (hidden if achievement.hidden else visible).append(achievement.id)

        chains = [
            chain_status(chain, chain_levels.get(chain.id, 0), stats)
            for chain in self.catalog.chains
            if chain.is_active
        ]

        return GamificationSummary(
            total_lifetime_points=total,
            current_balance=balance,
            level=level.level,
            points_to_next_level=level.points_to_next,
            level_progress=level_progress(total, thresholds),
            achievements=visible,
            hidden_discovered=hidden,
            chains=chains,
            hints=discovery_hints(stats, unlocked, self.catalog),
        )

"""
Evaluate Progress Use Case - unlock achievements and advance chains.

The caller supplies a fresh stats snapshot (post counts, streaks, days as
member, ...). The domain decides what is newly earned; this use-case persists
unlocks and chain levels and credits their point rewards exactly once.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from woofadaar.core.domain.achievements import ChainLevelUp, evaluate_chain_progress
from woofadaar.core.domain.catalog import GamificationCatalog, get_catalog
from woofadaar.core.domain.levels import resolve_level
from woofadaar.database.models import User
from woofadaar.storage import achievement_repo, chain_repo, points_repo

logger = logging.getLogger(__name__)

ACHIEVEMENT_SOURCE = "achievement"
CHAIN_SOURCE = "achievement_chain"


@dataclass
class ProgressEvaluationResult:
    """Outcome of a progress evaluation."""

    success: bool
    level_ups: list[ChainLevelUp] = field(default_factory=list)
    new_achievements: list[str] = field(default_factory=list)
    discovered_hidden: list[str] = field(default_factory=list)
    points_awarded: int = 0
    new_level: int = 1
    leveled_up: bool = False
    error_message: str = ""


@dataclass
class _Reward:
    source: str
    source_id: str
    points: int
    description: str


class EvaluateProgressUseCase:
    """Use-case for evaluating achievements and chain progress."""

    def __init__(self, catalog: GamificationCatalog | None = None):
        self.catalog = catalog or get_catalog()

    async def execute(
        self, user: User, stats: Mapping[str, Any]
    ) -> ProgressEvaluationResult:
        """
        Evaluate and persist progress for a user.

        Args:
            user: User
            stats: metric name -> value, computed by the caller

        Returns:
            ProgressEvaluationResult with what was actually persisted
        """
        # 1. Load state (repository)
        unlocked = await achievement_repo.get_unlocked_ids(user)
        chain_levels = await chain_repo.get_levels(user)

        # 2. Evaluate (domain)
        progress = evaluate_chain_progress(
            user.id, stats, chain_levels, self.catalog, already_unlocked=unlocked
        )

        result = ProgressEvaluationResult(success=True)
        rewards: list[_Reward] = []

        # 3. Chain level-ups (repository)
        for level_up in progress.level_ups:
            chain = self.catalog.chain_by_id(level_up.chain_id)
            completed = level_up.new_level >= chain.total_levels

            # Level and its achievement are stored together or not at all
            async with in_transaction() as conn:
                raised = await chain_repo.advance(
                    user,
                    level_up.chain_id,
                    level_up.new_level,
                    completed=completed,
                    using_db=conn,
                )
                if raised:
                    await achievement_repo.unlock(
                        user,
                        level_up.achievement.id,
                        chain_id=level_up.chain_id,
                        using_db=conn,
                    )
            if not raised:
                # A concurrent evaluation already stored this level
                continue
            result.level_ups.append(level_up)

            if completed:
                logger.info(f"User {user.id} completed chain {level_up.chain_id}")

            if level_up.achievement.points_reward:
                rewards.append(
                    _Reward(
                        source=CHAIN_SOURCE,
                        source_id=f"{level_up.chain_id}:{level_up.new_level}",
                        points=level_up.achievement.points_reward,
                        description=(
                            f"Reached {level_up.chain_name} level "
                            f"{level_up.new_level}: {level_up.achievement.name}"
                        ),
                    )
                )

        # 4. Standalone achievements (repository)
        for achievement_id in progress.new_achievements + progress.discovered_hidden:
            achievement = self.catalog.achievement_by_id(achievement_id)
            created = await achievement_repo.unlock(
                user, achievement_id, is_hidden=achievement.hidden
            )
            if not created:
                continue

            if achievement.hidden:
                result.discovered_hidden.append(achievement_id)
            else:
                result.new_achievements.append(achievement_id)

            if achievement.points_reward:
                rewards.append(
                    _Reward(
                        source=ACHIEVEMENT_SOURCE,
                        source_id=achievement_id,
                        points=achievement.points_reward,
                        description=f"Achievement unlocked: {achievement.name}",
                    )
                )

        # 5. Credit rewards
        await self._credit_rewards(user, rewards, result)

        if result.level_ups or result.new_achievements or result.discovered_hidden:
            logger.info(
                f"User {user.id} progress: {len(result.level_ups)} chain level-ups, "
                f"{len(result.new_achievements)} achievements, "
                f"{len(result.discovered_hidden)} hidden discovered"
            )

        return result

    async def _credit_rewards(
        self, user: User, rewards: list[_Reward], result: ProgressEvaluationResult
    ) -> None:
        current = await points_repo.get_points(user)
        total = current.total_lifetime_points if current else 0
        start_level = resolve_level(total, self.catalog.level_thresholds).level
        result.new_level = start_level

        for reward in rewards:
            level = resolve_level(total + reward.points, self.catalog.level_thresholds)
            try:
                await points_repo.record_award(
                    user,
                    points=reward.points,
                    level=level.level,
                    source=reward.source,
                    source_id=reward.source_id,
                    description=reward.description,
                )
            except IntegrityError:
                logger.warning(
                    f"Reward {reward.source}/{reward.source_id} already credited "
                    f"to user {user.id}"
                )
                continue

            total += reward.points
            result.points_awarded += reward.points
            result.new_level = level.level

        result.leveled_up = result.new_level > start_level

"""
Achievement Domain Rules - unlock and chain-progress evaluation.

Pure functions over a stats snapshot: no DB access, no side effects, the
snapshot is never mutated. Callers persist unlocks and chain levels and pass
them back in on the next evaluation.

Every condition type (count, streak, milestone, special) is satisfied when
the metric value is >= target. A streak metric is expected to already hold the
running streak length.
"""

import logging
from collections.abc import Collection, Mapping, Set
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from typing import Any

from woofadaar.core.domain.catalog import (
    AchievementCondition,
    AchievementDefinition,
    ChainDefinition,
    ChainLevelDefinition,
    GamificationCatalog,
)

logger = logging.getLogger(__name__)

# Hidden achievements start showing their hint at this progress
HINT_PROGRESS_THRESHOLD = 50.0


@dataclass(frozen=True)
class ChainLevelUp:
    chain_id: str
    chain_name: str
    previous_level: int
    new_level: int
    achievement: ChainLevelDefinition


@dataclass
class ChainProgressResult:
    level_ups: list[ChainLevelUp] = field(default_factory=list)
    new_achievements: list[str] = field(default_factory=list)
    discovered_hidden: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.level_ups or self.new_achievements or self.discovered_hidden)


@dataclass(frozen=True)
class ChainStatus:
    chain_id: str
    current_level: int
    total_levels: int
    completed: bool
    next_level: ChainLevelDefinition | None
    next_level_progress: float


def metric_value(stats: Mapping[str, Any], metric: str) -> float:
    """
    Numeric value of a metric in the stats snapshot.

    - absent / None -> 0
    - bool -> 0 or 1
    - numbers -> as is
    - collections (e.g. list of festivals) -> their length
    - anything else (dates, strings) -> 0

    Examples:
        >>> metric_value({"posts": 3}, "posts")
        3
        >>> metric_value({"festival_participation": ["diwali", "holi"]}, "festival_participation")
        2
        >>> metric_value({}, "posts")
        0
    """
    value = stats.get(metric)
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (Real, Decimal)):
        return value
    if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
        return len(value)
    return 0


def is_condition_met(condition: AchievementCondition, stats: Mapping[str, Any]) -> bool:
    """Check a condition against the snapshot. Missing metrics are not satisfied."""
    return metric_value(stats, condition.metric) >= condition.target


def achievement_progress(
    achievement: AchievementDefinition, stats: Mapping[str, Any]
) -> float:
    """Progress toward an achievement, percent 0-100."""
    target = achievement.condition.target
    if target <= 0:
        return 100.0
    current = float(metric_value(stats, achievement.condition.metric))
    return round(min(100.0, max(0.0, current / target * 100)), 1)


def evaluate_achievements(
    stats: Mapping[str, Any],
    already_unlocked: Set[str],
    catalog: GamificationCatalog,
) -> list[str]:
    """
    Standalone achievements newly satisfied by the snapshot.

    Achievements in `already_unlocked` are skipped and never returned again,
    so evaluating twice with the first result added to `already_unlocked`
    yields an empty list. Hidden achievements are evaluated like any other.

    Args:
        stats: metric name -> value
        already_unlocked: ids the user already holds
        catalog: gamification catalog

    Returns:
        Newly satisfied achievement ids, in catalog order
    """
    return [
        achievement.id
        for achievement in catalog.achievements
        if achievement.id not in already_unlocked
        and is_condition_met(achievement.condition, stats)
    ]


def _next_chain_level_up(
    chain: ChainDefinition, current_level: int, stats: Mapping[str, Any]
) -> ChainLevelUp | None:
    next_level = chain.level(current_level + 1)
    if next_level is None:
        # Completed chain, nothing to re-evaluate
        return None

    if not is_condition_met(next_level.condition, stats):
        return None

    return ChainLevelUp(
        chain_id=chain.id,
        chain_name=chain.name,
        previous_level=current_level,
        new_level=next_level.level,
        achievement=next_level,
    )


def evaluate_chain_progress(
    user_id: int | str,
    stats: Mapping[str, Any],
    current_chain_levels: Mapping[str, int],
    catalog: GamificationCatalog,
    already_unlocked: Set[str] = frozenset(),
) -> ChainProgressResult:
    """
    Evaluate progressive chains and standalone achievements.

    Each active chain advances at most one level per call, even when later
    levels are also satisfied; the next call (after the caller persists the new
    level) surfaces the following level-up. Chain levels never go down.

    Standalone achievements newly satisfied are split into `new_achievements`
    (visible) and `discovered_hidden` (hidden).

    Args:
        user_id: only used for logging
        stats: metric name -> value
        current_chain_levels: chain id -> current level (missing = 0)
        catalog: gamification catalog
        already_unlocked: standalone achievement ids the user already holds

    Returns:
        ChainProgressResult
    """
    result = ChainProgressResult()

    for chain in catalog.chains:
        if not chain.is_active:
            continue

        current_level = max(current_chain_levels.get(chain.id, 0), 0)
        level_up = _next_chain_level_up(chain, current_level, stats)
        if level_up is None:
            continue

        logger.debug(
            f"User {user_id}: chain {chain.id} level "
            f"{level_up.previous_level} -> {level_up.new_level}"
        )
        result.level_ups.append(level_up)

    for achievement_id in evaluate_achievements(stats, already_unlocked, catalog):
        achievement = catalog.achievement_by_id(achievement_id)
        if achievement is not None and achievement.hidden:
            result.discovered_hidden.append(achievement_id)
        else:
            result.new_achievements.append(achievement_id)

    return result


def chain_status(
    chain: ChainDefinition, current_level: int, stats: Mapping[str, Any]
) -> ChainStatus:
    """Where the user stands in a chain and how close the next level is."""
    current_level = min(max(current_level, 0), chain.total_levels)
    next_level = chain.level(current_level + 1)

    return ChainStatus(
        chain_id=chain.id,
        current_level=current_level,
        total_levels=chain.total_levels,
        completed=current_level >= chain.total_levels,
        next_level=next_level,
        next_level_progress=(
            achievement_progress(next_level, stats) if next_level else 100.0
        ),
    )


def discovery_hints(
    stats: Mapping[str, Any],
    already_unlocked: Set[str],
    catalog: GamificationCatalog,
) -> list[str]:
    """Hints for hidden achievements the user is at least halfway toward."""
    hints = []
    for achievement in catalog.achievements:
        if not achievement.hidden or not achievement.discovery_hint:
            continue
        if achievement.id in already_unlocked:
            continue

        progress = achievement_progress(achievement, stats)
        if HINT_PROGRESS_THRESHOLD <= progress < 100.0:
            hints.append(achievement.discovery_hint)

    return hints

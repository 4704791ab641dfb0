"""
Level Resolver - maps lifetime points to a level.

Pure functions, no DB access, no side effects.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from woofadaar.core.domain.errors import InvalidInputError

# Beyond the last defined threshold there is always one more synthetic level
OPEN_ENDED_STEP = 10000


@dataclass(frozen=True)
class LevelInfo:
    level: int
    points_to_next: int


def _normalize_total(total_lifetime_points: int) -> int:
    # bool is an int subclass but never a meaningful point total
    if isinstance(total_lifetime_points, bool) or not isinstance(
        total_lifetime_points, int
    ):
        raise InvalidInputError(
            f"Lifetime points must be an integer, got {total_lifetime_points!r}"
        )
    # Negative totals are treated as 0
    return max(total_lifetime_points, 0)


def resolve_level(total_lifetime_points: int, thresholds: Sequence[int]) -> LevelInfo:
    """
    Resolve level and points remaining to the next level.

    Scans thresholds from the highest index down; level is index+1 of the first
    threshold <= total. At the maximum level the target is last threshold + 10000.

    Args:
        total_lifetime_points: cumulative points (negative values count as 0)
        thresholds: strictly increasing, thresholds[0] == 0

    Returns:
        LevelInfo(level, points_to_next)

    Examples:
        >>> resolve_level(750, (0, 100, 250, 500, 1000))
        LevelInfo(level=4, points_to_next=250)
        >>> resolve_level(1200, (0, 100, 250, 500, 1000))
        LevelInfo(level=5, points_to_next=9800)
    """
    total = _normalize_total(total_lifetime_points)

    level = 1
    for index in range(len(thresholds) - 1, -1, -1):
        if total >= thresholds[index]:
            level = index + 1
            break

    if level < len(thresholds):
        next_threshold = thresholds[level]
    else:
        next_threshold = thresholds[-1] + OPEN_ENDED_STEP

    return LevelInfo(level=level, points_to_next=next_threshold - total)


def level_progress(total_lifetime_points: int, thresholds: Sequence[int]) -> float:
    """Percent of the way from the current level's threshold to the next (0-100)."""
    total = _normalize_total(total_lifetime_points)
    info = resolve_level(total, thresholds)

    floor = thresholds[info.level - 1]
    span = (total + info.points_to_next) - floor
    return round(min(100.0, (total - floor) / span * 100), 1)

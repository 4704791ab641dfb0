"""
Points Domain Rules - pure functions for point awards.

No DB access, no side effects. Use-cases call these to compute an award and
then persist the transaction themselves.
"""

from dataclasses import dataclass, fields
from datetime import date

from woofadaar.core.domain.catalog import GamificationCatalog
from woofadaar.core.domain.errors import InvalidActionError
from woofadaar.core.domain.levels import resolve_level
from woofadaar.core.domain.regional import regional_bonus
from woofadaar.core.domain.rounding import ONE, as_decimal, round_half_up, to_display_multiplier

NEW_USER_WINDOW_DAYS = 30


@dataclass(frozen=True)
class ContextFlags:
    """Active bonus conditions for an award. All default to False."""

    is_new_user: bool = False
    is_premium: bool = False
    is_expert: bool = False
    is_community_leader: bool = False
    is_festival_period: bool = False
    is_weekend: bool = False
    is_birthday_month: bool = False


# ContextFlags field -> ContextMultipliers field
FLAG_MULTIPLIERS: dict[str, str] = {
    "is_new_user": "new_user",
    "is_premium": "premium_user",
    "is_expert": "expert_user",
    "is_community_leader": "community_leader",
    "is_festival_period": "festival_event",
    "is_weekend": "weekend_bonus",
    "is_birthday_month": "birthday_month",
}


@dataclass(frozen=True)
class PointsCalculation:
    points: int
    multiplier: float


@dataclass(frozen=True)
class PointsAwardResult:
    points: int
    multiplier: float
    new_level: int
    leveled_up: bool
    points_to_next_level: int
    base_points: int
    total_lifetime_points: int


def base_points(action: str, catalog: GamificationCatalog) -> int:
    """Base points for an action. Raises InvalidActionError for unknown ids."""
    try:
        return catalog.actions[action]
    except KeyError:
        raise InvalidActionError(action) from None


def _context_multiplier(context: ContextFlags, catalog: GamificationCatalog):
    multiplier = ONE
    for flag in fields(ContextFlags):
        if getattr(context, flag.name):
            factor = getattr(catalog.multipliers, FLAG_MULTIPLIERS[flag.name])
            multiplier *= as_decimal(factor)
    return multiplier


def calculate_points(
    action: str,
    catalog: GamificationCatalog,
    context: ContextFlags | None = None,
) -> PointsCalculation:
    """
    Calculate points for an action with contextual multipliers.

    Every active flag multiplies the running multiplier; points are
    round-half-up(base * multiplier). The multiplier is reported to 2 decimals.

    Raises:
        InvalidActionError: action is not in the catalog

    Examples:
        >>> calculate_points("bestAnswer", catalog, ContextFlags(is_expert=True, is_festival_period=True))
        PointsCalculation(points=130, multiplier=2.6)
    """
    base = base_points(action, catalog)
    multiplier = _context_multiplier(context or ContextFlags(), catalog)

    return PointsCalculation(
        points=round_half_up(base * multiplier),
        multiplier=to_display_multiplier(multiplier),
    )


def award_points(
    action: str,
    total_before: int,
    catalog: GamificationCatalog,
    context: ContextFlags | None = None,
    city: str | None = None,
    festival: str | None = None,
    dog_breed: str | None = None,
) -> PointsAwardResult:
    """
    Full award decision: context multipliers, regional bonus, resulting level.

    Final points = round-half-up(calculate_points(...).points * regional bonus).

    Args:
        action: action id from the catalog
        total_before: lifetime points before this award
        catalog: gamification catalog
        context: active bonus flags
        city, festival, dog_breed: regional bonus inputs

    Returns:
        PointsAwardResult for the caller to persist

    Raises:
        InvalidActionError: action is not in the catalog
    """
    calculation = calculate_points(action, catalog, context)
    # Applied at its reported 2-decimal precision
    bonus = as_decimal(
        regional_bonus(catalog, city=city, festival=festival, dog_breed=dog_breed)
    )

    points = round_half_up(calculation.points * bonus)
    total_multiplier = _context_multiplier(context or ContextFlags(), catalog) * bonus

    previous = resolve_level(total_before, catalog.level_thresholds)
    new_total = max(total_before, 0) + points
    current = resolve_level(new_total, catalog.level_thresholds)

    return PointsAwardResult(
        points=points,
        multiplier=to_display_multiplier(total_multiplier),
        new_level=current.level,
        leveled_up=current.level > previous.level,
        points_to_next_level=current.points_to_next,
        base_points=base_points(action, catalog),
        total_lifetime_points=new_total,
    )


def derive_context_flags(
    joined_on: date,
    today: date,
    birth_month: int | None = None,
    is_premium: bool = False,
    is_expert: bool = False,
    is_community_leader: bool = False,
    is_festival_period: bool = False,
    new_user_window_days: int = NEW_USER_WINDOW_DAYS,
) -> ContextFlags:
    """
    Build ContextFlags from user facts and the current date.

    Rules:
    - new user: joined less than new_user_window_days ago
    - weekend: Saturday or Sunday
    - birthday month: today.month == birth_month
    - festival period: passed through as given; a festival name feeds only
      the regional bonus in award_points()
    """
    return ContextFlags(
        is_new_user=(today - joined_on).days < new_user_window_days,
        is_premium=is_premium,
        is_expert=is_expert,
        is_community_leader=is_community_leader,
        is_festival_period=is_festival_period,
        is_weekend=today.weekday() >= 5,
        is_birthday_month=birth_month is not None and today.month == birth_month,
    )


def describe_award(action: str, multiplier: float, catalog: GamificationCatalog) -> str:
    """
    Transaction description for an award.

    Examples:
        >>> describe_award("bestAnswer", 2.6, catalog)
        'Answer marked as best by community (2.6x multiplier applied)'
    """
    description = catalog.action_descriptions.get(action, f"Points for {action}")
    if multiplier > 1:
        description += f" ({multiplier:g}x multiplier applied)"
    return description

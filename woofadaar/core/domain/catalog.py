"""
Gamification Catalog - immutable configuration for points, levels and achievements.

The catalog is validated once at load time. Anything malformed (duplicate ids,
non-increasing thresholds, broken chains) fails fast with InvalidCatalogError,
so runtime evaluation always works over a validated catalog.

Domain functions receive the catalog as an argument; get_catalog() provides the
process-wide instance for callers that don't inject their own.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from woofadaar.core.domain.errors import InvalidCatalogError

logger = logging.getLogger(__name__)


def normalize_name(value: str) -> str:
    """
    Normalize a city/festival/breed name for lookups.

    Examples:
        >>> normalize_name("Ganesh Chaturthi")
        'ganesh-chaturthi'
        >>> normalize_name("  indian_pariah ")
        'indian-pariah'
    """
    return "-".join(value.strip().lower().replace("_", " ").split())


class ConditionType(str, Enum):
    """Catalog author's intent; all four are evaluated as `value >= target`."""

    count = "count"
    streak = "streak"
    milestone = "milestone"
    special = "special"


class Rarity(str, Enum):
    common = "common"
    rare = "rare"
    epic = "epic"
    legendary = "legendary"


class AchievementCondition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ConditionType
    target: float = Field(ge=0)
    metric: str = Field(min_length=1)
    # daily | weekly | monthly | all-time, informational only
    timeframe: str | None = None


class AchievementDefinition(BaseModel):
    """A single unlockable milestone."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    icon: str = ""
    category: str
    points_required: int = 0
    condition: AchievementCondition
    rarity: Rarity = Rarity.common
    hidden: bool = False
    discovery_hint: str | None = None
    regional: bool = False
    points_reward: int = Field(default=0, ge=0)


class ChainLevelDefinition(AchievementDefinition):
    """One stage of a progressive chain (1-based level)."""

    level: int = Field(ge=1)


class ChainDefinition(BaseModel):
    """Progressive multi-level achievement track."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    category: str
    total_levels: int = Field(ge=1)
    levels: tuple[ChainLevelDefinition, ...]
    is_active: bool = True

    @model_validator(mode="after")
    def check_levels(self) -> "ChainDefinition":
        if len(self.levels) != self.total_levels:
            raise ValueError(
                f"chain {self.id!r} declares {self.total_levels} levels "
                f"but defines {len(self.levels)}"
            )

        for expected, level in enumerate(self.levels, start=1):
            if level.level != expected:
                raise ValueError(
                    f"chain {self.id!r}: level {expected} is out of order "
                    f"(got level {level.level})"
                )

        for prev, cur in zip(self.levels, self.levels[1:]):
            same_metric = prev.condition.metric == cur.condition.metric
            if same_metric and cur.condition.target <= prev.condition.target:
                raise ValueError(
                    f"chain {self.id!r}: level {cur.level} target "
                    f"{cur.condition.target} does not exceed level {prev.level}"
                )

        return self

    def level(self, number: int) -> ChainLevelDefinition | None:
        """Get the definition for a 1-based level, None past the end."""
        if 1 <= number <= len(self.levels):
            return self.levels[number - 1]
        return None


class ContextMultipliers(BaseModel):
    """Multiplicative factors for the contextual point bonuses."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    new_user: float = Field(default=2.0, gt=1.0)  # first 30 days
    premium_user: float = Field(default=1.5, gt=1.0)
    expert_user: float = Field(default=1.3, gt=1.0)
    community_leader: float = Field(default=1.4, gt=1.0)
    festival_event: float = Field(default=2.0, gt=1.0)
    weekend_bonus: float = Field(default=1.2, gt=1.0)
    birthday_month: float = Field(default=1.5, gt=1.0)


class RegionalBonusTable(BaseModel):
    """Indian-context bonuses: major cities, festivals and native breeds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    major_cities: frozenset[str] = frozenset()
    city_bonus: float = Field(default=1.1, gt=1.0)
    festivals: Mapping[str, float] = Field(default_factory=dict)
    native_breeds: frozenset[str] = frozenset()
    breed_bonus: float = Field(default=1.2, gt=1.0)
    # festival -> (month, day), approximate dates used for detection
    festival_calendar: Mapping[str, tuple[int, int]] = Field(default_factory=dict)
    festival_window_days: int = Field(default=2, ge=0)

    @field_validator("major_cities", "native_breeds", mode="before")
    @classmethod
    def normalize_names(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(normalize_name(name) for name in v)
        return v

    @field_validator("festivals", "festival_calendar", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {normalize_name(name): value for name, value in v.items()}
        return v

    @field_validator("festivals", mode="after")
    @classmethod
    def freeze_festivals(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        for name, multiplier in v.items():
            if multiplier <= 1.0:
                raise ValueError(f"festival {name!r} multiplier must be > 1.0")
        return MappingProxyType(dict(v))

    @field_validator("festival_calendar", mode="after")
    @classmethod
    def freeze_calendar(
        cls, v: Mapping[str, tuple[int, int]]
    ) -> Mapping[str, tuple[int, int]]:
        for name, (month, day) in v.items():
            if not (1 <= month <= 12 and 1 <= day <= 31):
                raise ValueError(f"festival {name!r} has invalid date {month}/{day}")
        return MappingProxyType(dict(v))


class GamificationCatalog(BaseModel):
    """Everything the engine needs, validated and read-only."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    actions: Mapping[str, int]
    action_descriptions: Mapping[str, str] = Field(default_factory=dict)
    multipliers: ContextMultipliers = Field(default_factory=ContextMultipliers)
    level_thresholds: tuple[int, ...]
    regional: RegionalBonusTable = Field(default_factory=RegionalBonusTable)
    achievements: tuple[AchievementDefinition, ...] = ()
    chains: tuple[ChainDefinition, ...] = ()

    @field_validator("actions", mode="after")
    @classmethod
    def check_actions(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        if not v:
            raise ValueError("action catalog is empty")
        for action, points in v.items():
            if points <= 0:
                raise ValueError(f"action {action!r} must award positive points")
        return MappingProxyType(dict(v))

    @field_validator("action_descriptions", mode="after")
    @classmethod
    def freeze_descriptions(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_validator("level_thresholds", mode="after")
    @classmethod
    def check_thresholds(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("level thresholds are empty")
        if v[0] != 0:
            raise ValueError("first level threshold must be 0")
        for prev, cur in zip(v, v[1:]):
            if cur <= prev:
                raise ValueError(
                    f"level thresholds must be strictly increasing ({prev} -> {cur})"
                )
        return v

    @model_validator(mode="after")
    def check_unique_ids(self) -> "GamificationCatalog":
        seen: set[str] = set()
        for achievement_id in self.all_achievement_ids():
            if achievement_id in seen:
                raise ValueError(f"duplicate achievement id {achievement_id!r}")
            seen.add(achievement_id)

        chain_ids = [chain.id for chain in self.chains]
        if len(chain_ids) != len(set(chain_ids)):
            raise ValueError("duplicate chain id")

        unknown = set(self.action_descriptions) - set(self.actions)
        if unknown:
            raise ValueError(f"descriptions for unknown actions: {sorted(unknown)}")

        return self

    # ============ Lookups ============

    def all_achievement_ids(self) -> list[str]:
        """Ids of standalone achievements followed by every chain level."""
        ids = [a.id for a in self.achievements]
        for chain in self.chains:
            ids.extend(level.id for level in chain.levels)
        return ids

    def achievement_by_id(self, achievement_id: str) -> AchievementDefinition | None:
        for achievement in self.achievements:
            if achievement.id == achievement_id:
                return achievement
        for chain in self.chains:
            for level in chain.levels:
                if level.id == achievement_id:
                    return level
        return None

    def chain_by_id(self, chain_id: str) -> ChainDefinition | None:
        for chain in self.chains:
            if chain.id == chain_id:
                return chain
        return None

    def public_achievements(
        self, category: str | None = None
    ) -> list[AchievementDefinition]:
        """Standalone achievements for public listings (hidden ones excluded)."""
        return [
            a
            for a in self.achievements
            if not a.hidden and (category is None or a.category == category)
        ]

    def regional_achievements(self) -> list[AchievementDefinition]:
        return [a for a in self.achievements if a.regional and not a.hidden]


def load_catalog(data: Mapping[str, Any] | GamificationCatalog) -> GamificationCatalog:
    """
    Validate raw catalog data.

    Raises:
        InvalidCatalogError: if the data is malformed
    """
    if isinstance(data, GamificationCatalog):
        return data

    try:
        return GamificationCatalog.model_validate(data)
    except ValidationError as e:
        raise InvalidCatalogError(
            f"Invalid gamification catalog: {e.error_count()} error(s)\n{e}",
            errors=e.errors(include_url=False),
        ) from e


def load_catalog_file(path: str | Path) -> GamificationCatalog:
    """Load and validate a JSON catalog file."""
    text = Path(path).read_text(encoding="utf-8")

    try:
        return GamificationCatalog.model_validate_json(text)
    except ValidationError as e:
        raise InvalidCatalogError(
            f"Invalid gamification catalog in {path}: {e.error_count()} error(s)\n{e}",
            errors=e.errors(include_url=False),
        ) from e


@lru_cache(maxsize=1)
def get_catalog() -> GamificationCatalog:
    """Process-wide catalog, loaded once."""
    from woofadaar.config import config
    from woofadaar.core.domain.catalog_data import DEFAULT_CATALOG

    if config.GAMIFICATION_CATALOG_PATH:
        catalog = load_catalog_file(config.GAMIFICATION_CATALOG_PATH)
        logger.info(f"Loaded gamification catalog from {config.GAMIFICATION_CATALOG_PATH}")
    else:
        catalog = load_catalog(DEFAULT_CATALOG)
        logger.info("Loaded built-in gamification catalog")

    logger.info(
        f"Catalog: {len(catalog.actions)} actions, "
        f"{len(catalog.achievements)} achievements, {len(catalog.chains)} chains"
    )
    return catalog

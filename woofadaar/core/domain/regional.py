"""
Regional Bonus Rules - Indian context bonuses on top of awarded points.

Pure functions, no DB access, no side effects.
"""

from datetime import date
from decimal import Decimal

from woofadaar.core.domain.catalog import GamificationCatalog, normalize_name
from woofadaar.core.domain.rounding import ONE, as_decimal, to_display_multiplier


def regional_bonus_decimal(
    catalog: GamificationCatalog,
    city: str | None = None,
    festival: str | None = None,
    dog_breed: str | None = None,
) -> Decimal:
    """Exact (unrounded) regional multiplier, see regional_bonus()."""
    table = catalog.regional
    bonus = ONE

    if city and normalize_name(city) in table.major_cities:
        bonus *= as_decimal(table.city_bonus)

    if festival:
        festival_multiplier = table.festivals.get(normalize_name(festival))
        if festival_multiplier is not None:
            bonus *= as_decimal(festival_multiplier)

    if dog_breed and normalize_name(dog_breed) in table.native_breeds:
        bonus *= as_decimal(table.breed_bonus)

    return bonus


def regional_bonus(
    catalog: GamificationCatalog,
    city: str | None = None,
    festival: str | None = None,
    dog_breed: str | None = None,
) -> float:
    """
    Regional multiplier for a city, festival and dog breed.

    - major city: x city_bonus (1.1)
    - recognized festival: x that festival's own multiplier
    - native Indian breed: x breed_bonus (1.2)

    Unknown or missing values contribute nothing (x1.0).

    Examples:
        >>> regional_bonus(catalog, city="Mumbai", dog_breed="Rajapalayam")
        1.32
    """
    return to_display_multiplier(
        regional_bonus_decimal(catalog, city=city, festival=festival, dog_breed=dog_breed)
    )


def detect_festival(catalog: GamificationCatalog, today: date) -> str | None:
    """
    Festival whose approximate date is within the window around `today`.

    Returns the normalized festival name or None.
    """
    table = catalog.regional
    for name, (month, day) in table.festival_calendar.items():
        # Neighbouring years too, so the window wraps around New Year
        for year in (today.year - 1, today.year, today.year + 1):
            try:
                festival_day = date(year, month, day)
            except ValueError:
                # e.g. Feb 29 outside a leap year
                continue
            if abs((today - festival_day).days) <= table.festival_window_days:
                return name
    return None

"""Tests for catalog loading and validation."""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from woofadaar.core.domain.catalog import load_catalog, load_catalog_file, normalize_name
from woofadaar.core.domain.errors import InvalidCatalogError
from woofadaar.core.domain.regional import detect_festival, regional_bonus


def test_default_catalog_loads(default_catalog) -> None:
    assert default_catalog.actions["bestAnswer"] == 50
    assert default_catalog.level_thresholds[0] == 0
    assert len(default_catalog.level_thresholds) == 20
    assert {chain.id for chain in default_catalog.chains} == {
        "community_expert_chain",
        "dog_care_master_chain",
    }


def test_default_catalog_ids_are_unique(default_catalog) -> None:
    ids = default_catalog.all_achievement_ids()
    assert len(ids) == len(set(ids))


def test_lookup_finds_chain_levels(default_catalog) -> None:
    level = default_catalog.achievement_by_id("ce_trusted_advisor")

    assert level is not None
    assert level.level == 4
    assert default_catalog.achievement_by_id("nope") is None
    assert default_catalog.chain_by_id("nope") is None


def test_public_listing_excludes_hidden(default_catalog) -> None:
    public_ids = {a.id for a in default_catalog.public_achievements()}

    assert "first_paw_print" in public_ids
    assert "night_owl" not in public_ids
    assert all(a.category == "health" for a in default_catalog.public_achievements("health"))


def test_regional_listing(default_catalog) -> None:
    regional_ids = {a.id for a in default_catalog.regional_achievements()}

    assert regional_ids
    assert "festive_spirit" not in regional_ids  # hidden


def test_duplicate_achievement_id_rejected(catalog_data) -> None:
    data = catalog_data
    data["achievements"][1]["id"] = "firstPost"

    with pytest.raises(InvalidCatalogError) as exc_info:
        load_catalog(data)

    assert "duplicate achievement id" in str(exc_info.value)


def test_chain_level_colliding_with_achievement_rejected(catalog_data) -> None:
    data = catalog_data
    data["chains"][0]["levels"][0]["id"] = "helper"

    with pytest.raises(InvalidCatalogError):
        load_catalog(data)


@pytest.mark.parametrize(
    "thresholds",
    [[], [10, 100, 250], [0, 100, 100], [0, 250, 100]],
)
def test_bad_thresholds_rejected(catalog_data, thresholds) -> None:
    data = catalog_data
    data["level_thresholds"] = thresholds

    with pytest.raises(InvalidCatalogError):
        load_catalog(data)


def test_non_positive_action_points_rejected(catalog_data) -> None:
    data = catalog_data
    data["actions"]["commentPost"] = 0

    with pytest.raises(InvalidCatalogError) as exc_info:
        load_catalog(data)

    assert exc_info.value.errors


def test_chain_level_count_mismatch_rejected(catalog_data) -> None:
    data = catalog_data
    data["chains"][0]["total_levels"] = 6

    with pytest.raises(InvalidCatalogError):
        load_catalog(data)


def test_chain_targets_must_increase(catalog_data) -> None:
    data = catalog_data
    data["chains"][0]["levels"][2]["condition"]["target"] = 5

    with pytest.raises(InvalidCatalogError):
        load_catalog(data)


def test_festival_multiplier_must_exceed_one(catalog_data) -> None:
    data = catalog_data
    data["regional"] = {"festivals": {"Diwali": 1.0}}

    with pytest.raises(InvalidCatalogError):
        load_catalog(data)


def test_catalog_is_immutable(catalog) -> None:
    with pytest.raises(ValidationError):
        catalog.level_thresholds = (0, 1)

    with pytest.raises(TypeError):
        catalog.actions["questionPost"] = 1000

    with pytest.raises(ValidationError):
        catalog.achievements[0].name = "Renamed"


def test_load_catalog_file(catalog_data, tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")

    catalog = load_catalog_file(path)

    assert catalog.chain_by_id("contributor").total_levels == 5


def test_load_catalog_file_invalid(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"actions": {}}), encoding="utf-8")

    with pytest.raises(InvalidCatalogError):
        load_catalog_file(path)


def test_normalize_name() -> None:
    assert normalize_name("Ganesh Chaturthi") == "ganesh-chaturthi"
    assert normalize_name("indian_pariah") == "indian-pariah"


def test_regional_bonus(default_catalog) -> None:
    assert regional_bonus(default_catalog) == 1.0
    assert regional_bonus(default_catalog, city="mumbai") == 1.1
    assert regional_bonus(default_catalog, festival="Diwali") == 2.0
    assert regional_bonus(default_catalog, dog_breed="Indian Pariah") == 1.2
    assert regional_bonus(default_catalog, city="Mumbai", dog_breed="Rajapalayam") == 1.32
    assert regional_bonus(default_catalog, city="Springfield", festival="Halloween") == 1.0


def test_detect_festival(default_catalog) -> None:
    assert detect_festival(default_catalog, date(2024, 10, 14)) == "diwali"
    assert detect_festival(default_catalog, date(2024, 3, 17)) == "holi"
    assert detect_festival(default_catalog, date(2024, 1, 8)) is None


def test_detect_festival_across_month_boundary(catalog_data) -> None:
    catalog_data["regional"] = {
        "festival_calendar": {"Karva Chauth": [11, 1], "New Year": [1, 1]}
    }
    catalog = load_catalog(catalog_data)

    assert detect_festival(catalog, date(2024, 10, 30)) == "karva-chauth"
    assert detect_festival(catalog, date(2024, 11, 3)) == "karva-chauth"
    assert detect_festival(catalog, date(2024, 10, 29)) is None
    assert detect_festival(catalog, date(2024, 12, 31)) == "new-year"
    assert detect_festival(catalog, date(2025, 1, 2)) == "new-year"


def test_detect_festival_skips_missing_leap_day(catalog_data) -> None:
    catalog_data["regional"] = {"festival_calendar": {"Leap Fest": [2, 29]}}
    catalog = load_catalog(catalog_data)

    assert detect_festival(catalog, date(2024, 3, 1)) == "leap-fest"
    assert detect_festival(catalog, date(2023, 3, 1)) is None

"""Tests for achievement and chain evaluation rules."""

from decimal import Decimal

from woofadaar.core.domain.achievements import (
    achievement_progress,
    chain_status,
    discovery_hints,
    evaluate_achievements,
    evaluate_chain_progress,
    metric_value,
)


def test_metric_value_shapes() -> None:
    stats = {
        "posts": 3,
        "ratio": Decimal("2.5"),
        "verified": True,
        "festivals": ["diwali", "holi"],
        "joined": "2024-01-01",
        "empty": None,
    }

    assert metric_value(stats, "posts") == 3
    assert metric_value(stats, "ratio") == Decimal("2.5")
    assert metric_value(stats, "verified") == 1
    assert metric_value(stats, "festivals") == 2
    assert metric_value(stats, "joined") == 0
    assert metric_value(stats, "empty") == 0
    assert metric_value(stats, "missing") == 0


def test_first_achievement_unlocks(catalog) -> None:
    assert evaluate_achievements({"totalPosts": 1}, set(), catalog) == ["firstPost"]


def test_unlocked_achievement_not_returned_again(catalog) -> None:
    stats = {"totalPosts": 1, "helpfulVotes": 12}

    first = evaluate_achievements(stats, set(), catalog)
    second = evaluate_achievements(stats, set(first), catalog)

    assert first == ["firstPost", "helper"]
    assert second == []


def test_missing_metric_not_satisfied(catalog) -> None:
    assert evaluate_achievements({}, set(), catalog) == []


def test_stats_snapshot_not_mutated(catalog) -> None:
    stats = {"totalPosts": 30, "nightDays": 12}
    snapshot = dict(stats)

    evaluate_chain_progress(1, stats, {}, catalog)

    assert stats == snapshot


def test_chain_advances_one_level_per_call(catalog) -> None:
    """totalPosts=30 satisfies levels 1-4 but only level 1 is granted."""
    stats = {"totalPosts": 30}

    result = evaluate_chain_progress(1, stats, {}, catalog)

    assert len(result.level_ups) == 1
    level_up = result.level_ups[0]
    assert level_up.chain_id == "contributor"
    assert level_up.previous_level == 0
    assert level_up.new_level == 1
    assert level_up.achievement.id == "contributor_1"
    assert result.new_achievements == ["firstPost"]


def test_chain_continues_from_stored_level(catalog) -> None:
    levels = {}
    reached = []
    for _ in range(6):
        result = evaluate_chain_progress(1, {"totalPosts": 30}, levels, catalog)
        for level_up in result.level_ups:
            levels[level_up.chain_id] = level_up.new_level
            reached.append(level_up.new_level)

    assert reached == [1, 2, 3, 4]


def test_completed_chain_produces_nothing(catalog) -> None:
    result = evaluate_chain_progress(
        1, {"totalPosts": 1000}, {"contributor": 5}, catalog, {"firstPost"}
    )

    assert not result.has_changes


def test_chain_level_not_reported_as_standalone(catalog) -> None:
    result = evaluate_chain_progress(1, {"totalPosts": 1}, {}, catalog)

    assert "contributor_1" not in result.new_achievements


def test_inactive_chain_ignored(catalog_data) -> None:
    from woofadaar.core.domain.catalog import load_catalog

    catalog_data["chains"][0]["is_active"] = False
    catalog = load_catalog(catalog_data)

    result = evaluate_chain_progress(1, {"totalPosts": 5}, {}, catalog)

    assert result.level_ups == []


def test_hidden_achievement_discovered(catalog) -> None:
    result = evaluate_chain_progress(1, {"nightDays": 10}, {}, catalog)

    assert result.discovered_hidden == ["night_owl"]
    assert result.new_achievements == []


def test_hidden_achievement_not_rediscovered(catalog) -> None:
    result = evaluate_chain_progress(
        1, {"nightDays": 10}, {}, catalog, already_unlocked={"night_owl"}
    )

    assert result.discovered_hidden == []


def test_default_catalog_first_post(default_catalog) -> None:
    result = evaluate_chain_progress(
        1, {"posts": 1, "dog_profiles": 1}, {}, default_catalog
    )

    assert [up.achievement.id for up in result.level_ups] == [
        "ce_first_steps",
        "dcm_new_parent",
    ]
    assert result.new_achievements == ["first_paw_print"]


def test_default_catalog_collection_metric(default_catalog) -> None:
    stats = {"festival_participation": ["diwali", "holi", "navratri", "onam", "pongal"]}

    result = evaluate_chain_progress(1, stats, {}, default_catalog)

    assert "festive_spirit" in result.discovered_hidden


def test_achievement_progress(catalog) -> None:
    helper = catalog.achievement_by_id("helper")

    assert achievement_progress(helper, {}) == 0.0
    assert achievement_progress(helper, {"helpfulVotes": 4}) == 40.0
    assert achievement_progress(helper, {"helpfulVotes": 50}) == 100.0


def test_chain_status(catalog) -> None:
    chain = catalog.chain_by_id("contributor")

    status = chain_status(chain, 2, {"totalPosts": 8})

    assert status.current_level == 2
    assert not status.completed
    assert status.next_level.id == "contributor_3"
    assert status.next_level_progress == 80.0


def test_chain_status_completed(catalog) -> None:
    status = chain_status(catalog.chain_by_id("contributor"), 5, {})

    assert status.completed
    assert status.next_level is None
    assert status.next_level_progress == 100.0


def test_discovery_hints(catalog) -> None:
    hint = "Some conversations happen when most are sleeping..."

    assert discovery_hints({"nightDays": 2}, set(), catalog) == []
    assert discovery_hints({"nightDays": 6}, set(), catalog) == [hint]
    assert discovery_hints({"nightDays": 6}, {"night_owl"}, catalog) == []
    assert discovery_hints({"nightDays": 10}, set(), catalog) == []

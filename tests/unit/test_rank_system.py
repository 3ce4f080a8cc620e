"""Unit tests for the rank ladder (hardman/gamification/rank_system.py)"""
import pytest

from hardman.gamification.rank_system import (
    calculate_rank,
    get_rank_progress,
    RANK_NAMES,
    RANK_THRESHOLDS,
)


# ============================================================================
# Rank Calculation Tests
# ============================================================================

@pytest.mark.parametrize("xp,expected", [
    (0, ("Recruit", 1)),
    (49, ("Recruit", 1)),
    (50, ("Soldier", 2)),
    (119, ("Soldier", 2)),
    (120, ("Corporal", 3)),
    (220, ("Sergeant", 4)),
    (360, ("Sub-lieutenant", 5)),
    (540, ("Lieutenant", 6)),
    (10000, ("Lieutenant", 6)),
])
def test_calculate_rank(xp, expected):
    assert calculate_rank(xp) == expected


def test_every_threshold_starts_its_rank():
    """Each threshold maps to its paired rank name"""
    for level, (threshold, name) in enumerate(zip(RANK_THRESHOLDS, RANK_NAMES), start=1):
        assert calculate_rank(threshold) == (name, level)


# ============================================================================
# Progress Tests
# ============================================================================

def test_get_rank_progress_mid_ladder():
    result = get_rank_progress(130)

    assert result["rank"] == "Corporal"
    assert result["level"] == 3
    assert result["total_xp"] == 130
    assert result["next_rank"] == "Sergeant"
    assert result["xp_to_next_rank"] == 90


def test_get_rank_progress_top_rank():
    """No next rank above Lieutenant"""
    result = get_rank_progress(999)

    assert result["rank"] == "Lieutenant"
    assert result["next_rank"] is None
    assert result["xp_to_next_rank"] is None

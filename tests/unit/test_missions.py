"""Unit tests for the mission codec and id generator"""
import pytest

from hardman.exceptions import ValidationError
from hardman.gamification.missions import (
    MissionIdGenerator,
    decode_missions,
    encode_missions,
)
from hardman.models.mission import Mission


# ============================================================================
# Codec Tests
# ============================================================================

def test_round_trip_preserves_order_and_flags():
    missions = [
        Mission(id=3, title="Planks 3×30s", done=False),
        Mission(id=2, title="Brisk 10-minute walk", done=True),
        Mission(id=1, title="Avoid sugar", done=False),
    ]

    encoded = encode_missions(missions)

    assert encoded == "3|Planks 3×30s|false;2|Brisk 10-minute walk|true;1|Avoid sugar|false"
    assert decode_missions(encoded) == missions


def test_encode_empty_list():
    assert encode_missions([]) == ""
    assert decode_missions("") == []


@pytest.mark.parametrize("raw", [None, "", "   ", 42])
def test_decode_missing_or_empty(raw):
    assert decode_missions(raw) == []


@pytest.mark.parametrize("raw", [
    "not a mission",
    "1|Walk",
    "x|Walk|false",
    "1|Walk|maybe",
    "1|Walk|false;2|Push|ups|true",
    "1|Walk|false;1|Run|true",
])
def test_decode_malformed_falls_back_to_empty(raw):
    """Malformed stored values never raise"""
    assert decode_missions(raw) == []


def test_decode_ignores_blank_records():
    assert decode_missions("5|Walk|TRUE;;") == [Mission(id=5, title="Walk", done=True)]


def test_encode_rejects_delimiters_in_titles():
    with pytest.raises(ValidationError):
        encode_missions([Mission(id=1, title="a|b")])
    with pytest.raises(ValidationError):
        encode_missions([Mission(id=1, title="a;b")])


# ============================================================================
# Id Generator Tests
# ============================================================================

def test_ids_unique_within_same_millisecond():
    """Frozen clock still yields strictly increasing ids"""
    generator = MissionIdGenerator(clock=lambda: 1700000000.0)

    ids = [generator.next_id() for _ in range(100)]

    assert len(set(ids)) == 100
    assert ids == sorted(ids)


def test_ids_follow_clock():
    now = [1700000000.0]
    generator = MissionIdGenerator(clock=lambda: now[0])

    first = generator()
    now[0] += 1
    second = generator()

    assert second - first == 1000 * 1000


def test_seed_skips_existing_ids():
    generator = MissionIdGenerator(clock=lambda: 0.0)
    generator.seed([10, 42, 7])

    assert generator.next_id() == 43

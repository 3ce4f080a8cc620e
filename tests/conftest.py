"""Global test fixtures and utilities for hardman tests"""
import random
from datetime import datetime
from unittest.mock import Mock

import pytest

from hardman.models.profile import Profile
from hardman.storage.kv_store import InMemoryKeyValueStore
from hardman.utils.voice import Speaker


# ============================================================================
# Timer Fixtures
# ============================================================================

class FakeTimer:
    def __init__(self, due_ms, seq, callback):
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock: timers only fire when the test calls advance()"""

    def __init__(self):
        self.now_ms = 0
        self._timers = []
        self._seq = 0

    def schedule(self, delay_ms, callback):
        self._seq += 1
        timer = FakeTimer(self.now_ms + delay_ms, self._seq, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self):
        return [t for t in self._timers if not t.cancelled and not t.fired]

    def advance(self, ms):
        target = self.now_ms + ms
        while True:
            due = [t for t in self.pending if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            timer.fired = True
            timer.callback()
        self.now_ms = target


@pytest.fixture
def scheduler():
    return FakeScheduler()


# ============================================================================
# Collaborator Fixtures
# ============================================================================

@pytest.fixture
def kv_store():
    """Empty in-memory key-value store"""
    return InMemoryKeyValueStore()


@pytest.fixture
def mock_speech():
    """Mock speech back-end that is never mid-sentence"""
    speech = Mock()
    speech.is_speaking = False
    return speech


@pytest.fixture
def mock_tones():
    return Mock()


@pytest.fixture
def mock_sfx():
    """Mock SoundEffects (games call sfx.play(kind))"""
    return Mock()


@pytest.fixture
def rng():
    return random.Random(1234)


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def test_profile():
    """Registered profile with a normal BMI"""
    return Profile(
        first_name="John",
        last_name="Rambo",
        country="US",
        birth_year="1990",
        weight_kg="70",
        height_cm="175",
        goal="reduce",
        intensity="firm",
        voice_tone="military",
        language_tag="en-US",
    )


@pytest.fixture
def profile_holder(test_profile):
    """Mutable holder so tests can swap the profile a provider returns"""
    holder = {"profile": test_profile}
    return holder


@pytest.fixture
def profile_provider(profile_holder):
    return lambda: profile_holder["profile"]


@pytest.fixture
def speaker(mock_speech, profile_provider):
    return Speaker(mock_speech, profile_provider)


@pytest.fixture
def morning():
    return lambda: datetime(2024, 1, 15, 8, 0, 0)


@pytest.fixture
def evening():
    return lambda: datetime(2024, 1, 15, 20, 0, 0)

"""Unit tests for the asyncio-backed scheduler and config validation"""
import asyncio
from unittest.mock import Mock

import pytest

from hardman import config
from hardman.exceptions import ConfigurationError
from hardman.utils.scheduler import AsyncioScheduler, cancel_timer


@pytest.mark.asyncio
async def test_callback_fires_after_delay():
    scheduler = AsyncioScheduler()
    callback = Mock()

    scheduler.schedule(10, callback)
    await asyncio.sleep(0.05)

    callback.assert_called_once()


@pytest.mark.asyncio
async def test_cancelled_callback_never_fires():
    scheduler = AsyncioScheduler()
    callback = Mock()

    handle = scheduler.schedule(10, callback)
    cancel_timer(handle)
    await asyncio.sleep(0.05)

    callback.assert_not_called()


@pytest.mark.asyncio
async def test_coroutine_callbacks_run_as_tasks():
    scheduler = AsyncioScheduler()
    done = asyncio.Event()

    async def callback():
        done.set()

    scheduler.schedule(5, callback)

    await asyncio.wait_for(done.wait(), timeout=1)


@pytest.mark.asyncio
async def test_coroutine_tasks_are_held_until_done():
    scheduler = AsyncioScheduler()
    release = asyncio.Event()
    started = asyncio.Event()

    async def callback():
        started.set()
        await release.wait()

    scheduler.schedule(1, callback)
    await asyncio.wait_for(started.wait(), timeout=1)

    assert len(scheduler._tasks) == 1

    release.set()
    await asyncio.sleep(0.01)

    assert scheduler._tasks == set()


@pytest.mark.asyncio
async def test_failing_coroutine_is_logged(caplog):
    scheduler = AsyncioScheduler()

    async def callback():
        raise RuntimeError("tick failed")

    scheduler.schedule(1, callback)
    await asyncio.sleep(0.05)

    assert scheduler._tasks == set()
    assert "tick failed" in caplog.text


def test_cancel_timer_accepts_none():
    cancel_timer(None)


def test_validate_config_defaults():
    config.validate_config()


def test_validate_config_rejects_bad_volume(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_SFX_VOLUME", 1.5)

    with pytest.raises(ConfigurationError):
        config.validate_config()


def test_validate_config_rejects_bad_log_level(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "CHATTY")

    with pytest.raises(ConfigurationError):
        config.validate_config()

"""Unit tests for key-value persistence"""
import asyncio
import json

import pytest

from hardman.exceptions import ValidationError
from hardman.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore


# ============================================================================
# Typed Getter Tests
# ============================================================================

@pytest.mark.asyncio
async def test_typed_getters_defaults():
    store = InMemoryKeyValueStore()

    assert await store.get("missing") is None
    assert await store.get_str("missing", "x") == "x"
    assert await store.get_int("missing", 5) == 5
    assert await store.get_float("missing", 0.7) == 0.7


@pytest.mark.asyncio
async def test_typed_getters_mistyped_values():
    store = InMemoryKeyValueStore({"xp": "lots", "vol": "loud", "n": 3})

    assert await store.get_int("xp", 0) == 0
    assert await store.get_float("vol", 1.0) == 1.0
    assert await store.get_str("n") == "3"
    assert await store.get_float("n") == 3.0


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, True, [1, 2], {"a": 1}])
async def test_set_rejects_unsupported_types(value):
    store = InMemoryKeyValueStore()

    with pytest.raises(ValidationError):
        await store.set("key", value)


# ============================================================================
# JSON File Store Tests
# ============================================================================

@pytest.mark.asyncio
async def test_json_store_survives_reopen(tmp_path):
    path = tmp_path / "prefs" / "hardman_prefs.json"
    store = JsonFileKeyValueStore(path)

    await store.set("missions", "1|Walk|false")
    await store.set("experiencePoints", 20)
    await store.set("sfxVolume", 0.5)

    reopened = JsonFileKeyValueStore(path)
    assert await reopened.get("missions") == "1|Walk|false"
    assert await reopened.get_int("experiencePoints") == 20
    assert await reopened.get_float("sfxVolume") == 0.5


@pytest.mark.asyncio
async def test_json_store_missing_file_is_empty(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "nope.json")

    assert await store.get("anything") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", ""])
async def test_json_store_corrupt_file_is_empty(tmp_path, content):
    path = tmp_path / "prefs.json"
    path.write_text(content)
    store = JsonFileKeyValueStore(path)

    assert await store.get("missions") is None

    await store.set("missions", "")
    assert json.loads(path.read_text()) == {"missions": ""}


@pytest.mark.asyncio
async def test_json_store_last_write_wins(tmp_path):
    """Concurrent writes to one key end with the last call's value"""
    path = tmp_path / "prefs.json"
    store = JsonFileKeyValueStore(path)

    await asyncio.gather(*(store.set("experiencePoints", i) for i in range(20)))

    assert await store.get("experiencePoints") == 19
    assert json.loads(path.read_text())["experiencePoints"] == 19


@pytest.mark.asyncio
async def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "prefs.json"
    store = JsonFileKeyValueStore(path)

    await asyncio.gather(store.set("voiceVolume", 0.9), store.set("sfxVolume", 0.1))

    assert json.loads(path.read_text()) == {"voiceVolume": 0.9, "sfxVolume": 0.1}

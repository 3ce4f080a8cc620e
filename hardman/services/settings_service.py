"""SettingsStore - voice and sound-effect volumes"""

import asyncio
import logging

import pydantic

from hardman.config import DEFAULT_VOICE_VOLUME, DEFAULT_SFX_VOLUME
from hardman.exceptions import ValidationError
from hardman.models.settings import AudioSettings
from hardman.storage import keys
from hardman.storage.kv_store import KeyValueStore
from hardman.utils.observable import Observable

logger = logging.getLogger(__name__)


class SettingsStore(Observable):
    """Observable audio settings backed by persisted preferences"""

    def __init__(self, kv_store: KeyValueStore):
        super().__init__()
        self.kv = kv_store
        self._settings = AudioSettings()
        self._lock = asyncio.Lock()

    @property
    def settings(self) -> AudioSettings:
        return self._settings

    async def load(self) -> AudioSettings:
        voice = await self.kv.get_float(keys.VOICE_VOLUME, DEFAULT_VOICE_VOLUME)
        sfx = await self.kv.get_float(keys.SFX_VOLUME, DEFAULT_SFX_VOLUME)
        try:
            loaded = AudioSettings(voice_volume=voice, sfx_volume=sfx)
        except pydantic.ValidationError as e:
            logger.warning(f"Stored volumes out of range, using defaults: {e}")
            loaded = AudioSettings()

        async with self._lock:
            self._settings = loaded
        self._notify()
        return loaded

    async def update_volumes(self, voice: float, sfx: float) -> AudioSettings:
        """
        Save both volumes

        Raises:
            ValidationError: If a volume is outside 0..1
        """
        try:
            updated = AudioSettings(voice_volume=voice, sfx_volume=sfx)
        except pydantic.ValidationError as e:
            raise ValidationError(
                message="Volumes must be between 0 and 1",
                field="volume",
                value={"voice": voice, "sfx": sfx},
                cause=e,
            )

        async with self._lock:
            self._settings = updated
            self._notify()
            await self.kv.set(keys.VOICE_VOLUME, updated.voice_volume)
            await self.kv.set(keys.SFX_VOLUME, updated.sfx_volume)
        logger.info(f"Volumes saved: voice={voice:.2f} sfx={sfx:.2f}")
        return updated

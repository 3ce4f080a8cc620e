"""
ProfileStore - Registration profile state

Loads the profile from the key-value store, applies field-by-field edits from
the registration form and persists them.
"""

import asyncio
import logging

from hardman.exceptions import ValidationError
from hardman.models.profile import Profile, PROFILE_FIELDS
from hardman.models.settings import BmiAssessment
from hardman.storage.keys import PROFILE_KEYS
from hardman.storage.kv_store import KeyValueStore
from hardman.utils.bmi import assess_bmi
from hardman.utils.observable import Observable

logger = logging.getLogger(__name__)


class ProfileStore(Observable):
    """Observable profile backed by persisted preferences"""

    def __init__(self, kv_store: KeyValueStore):
        super().__init__()
        self.kv = kv_store
        self._profile = Profile()
        self._lock = asyncio.Lock()

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def bmi(self) -> BmiAssessment:
        """BMI assessment for the current weight and height"""
        return assess_bmi(self._profile.weight_kg, self._profile.height_cm)

    async def load(self) -> Profile:
        """Read every profile field; missing keys keep their defaults"""
        values = {}
        for field, key in PROFILE_KEYS.items():
            value = await self.kv.get(key)
            if value is not None:
                values[field] = str(value)

        async with self._lock:
            self._profile = Profile(**values)
        logger.info(f"Profile loaded (registered={self._profile.is_registered})")
        self._notify()
        return self._profile

    async def update(self, profile: Profile) -> None:
        """Replace the whole profile and persist every field"""
        async with self._lock:
            self._profile = profile
            self._notify()
            for field, key in PROFILE_KEYS.items():
                await self.kv.set(key, getattr(profile, field))
        logger.info("Profile saved")

    async def update_field(self, field: str, value: str) -> Profile:
        """Change one profile field (registration form edit) and persist it"""
        if field not in PROFILE_FIELDS:
            raise ValidationError(message=f"Unknown profile field: {field}", field=field, value=value)

        async with self._lock:
            data = self._profile.model_dump()
            data[field] = value
            self._profile = Profile(**data)
            self._notify()
            await self.kv.set(PROFILE_KEYS[field], getattr(self._profile, field))
        logger.debug(f"Profile field {field} updated")
        return self._profile

"""
MotivationLoop - repeated sergeant shouts

While active, speaks a phrase for the profile's intensity right away and then
every MOTIVATION_INTERVAL_MS. Each run carries a generation number; a timer
from an older run that fires late sees a stale generation and does nothing.
"""

import logging
from typing import Callable, Optional

from hardman.config import MOTIVATION_INTERVAL_MS
from hardman.models.profile import Profile
from hardman.utils.scheduler import Scheduler, TimerHandle, cancel_timer
from hardman.utils.voice import Speaker

logger = logging.getLogger(__name__)

MOTIVATION_PHRASES = {
    "moderate": "Come on, soldier! Breathing, posture and focus.",
    "firm": "Up! Today you don't negotiate with laziness.",
    "hard": "ON GUARD! EXECUTE THE MISSION NOW!",
}


def motivation_phrase(intensity: str) -> str:
    return MOTIVATION_PHRASES.get(intensity, MOTIVATION_PHRASES["firm"])


class MotivationLoop:
    """Toggleable, cancellable speech loop"""

    def __init__(
        self,
        speaker: Speaker,
        scheduler: Scheduler,
        profile_provider: Callable[[], Profile],
        interval_ms: int = MOTIVATION_INTERVAL_MS,
    ):
        self.speaker = speaker
        self.scheduler = scheduler
        self._profile_provider = profile_provider
        self.interval_ms = interval_ms
        self._active = False
        self._generation = 0
        self._handle: Optional[TimerHandle] = None
        self._voice_key = None

    @property
    def active(self) -> bool:
        return self._active

    def toggle(self) -> bool:
        """Switch the loop on or off; returns the new state"""
        if self._active:
            self.stop()
        else:
            self.start()
        return self._active

    def start(self) -> None:
        if self._active:
            return
        self._active = True
        logger.info("Motivation loop started")
        self._restart()

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        self._generation += 1
        cancel_timer(self._handle)
        self._handle = None
        self.speaker.stop()
        logger.info("Motivation loop stopped")

    def on_profile_changed(self, _source=None) -> None:
        """Restart the loop when intensity or voice tone change while active"""
        profile = self._profile_provider()
        key = (profile.intensity, profile.voice_tone)
        if self._active and key != self._voice_key:
            logger.debug(f"Motivation loop restarting for intensity={key[0]} voice={key[1]}")
            self._restart()

    def _restart(self) -> None:
        cancel_timer(self._handle)
        self._generation += 1
        self._shout(self._generation)

    def _shout(self, generation: int) -> None:
        if not self._active or generation != self._generation:
            return
        profile = self._profile_provider()
        self._voice_key = (profile.intensity, profile.voice_tone)
        self.speaker.say(motivation_phrase(profile.intensity))
        self._handle = self.scheduler.schedule(self.interval_ms, lambda: self._shout(generation))

"""Spoken output for the sergeant's voice"""
import logging
from typing import Callable, Dict, Protocol, Tuple

from hardman.models.profile import Profile

logger = logging.getLogger(__name__)

# voice tone -> (pitch, speech rate)
VOICE_PROFILES: Dict[str, Tuple[float, float]] = {
    "soft": (1.15, 0.95),
    "firm": (0.9, 1.05),
    "military": (0.75, 1.15),
}


class SpeechOutput(Protocol):
    """Text-to-speech back-end"""

    @property
    def is_speaking(self) -> bool: ...

    def speak(self, text: str, language_tag: str, pitch: float, rate: float) -> None: ...

    def stop(self) -> None: ...


class LoggingSpeechOutput:
    """Speech back-end for consoles and headless runs: writes to the log.

    Logging is synchronous, so nothing is ever left in flight.
    """

    @property
    def is_speaking(self) -> bool:
        return False

    def speak(self, text: str, language_tag: str, pitch: float, rate: float) -> None:
        logger.info(f"[voice {language_tag} pitch={pitch} rate={rate}] {text}")

    def stop(self) -> None:
        pass


def voice_profile(tone: str) -> Tuple[float, float]:
    """Pitch and rate for a voice tone; unknown tones sound firm"""
    return VOICE_PROFILES.get(tone, VOICE_PROFILES["firm"])


class Speaker:
    """Speaks text with the profile's language and voice tone"""

    def __init__(self, output: SpeechOutput, profile_provider: Callable[[], Profile]):
        self.output = output
        self._profile_provider = profile_provider

    def say(self, text: str) -> None:
        profile = self._profile_provider()
        if self.output.is_speaking:
            self.output.stop()
        pitch, rate = voice_profile(profile.voice_tone)
        self.output.speak(text, profile.language_tag, pitch, rate)

    def stop(self) -> None:
        self.output.stop()

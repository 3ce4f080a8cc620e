"""Short tone cues for the minigames"""
import logging
from typing import Callable, Literal, Protocol

from hardman.models.settings import AudioSettings

logger = logging.getLogger(__name__)

ToneKind = Literal["success", "error", "ack", "timeout"]


class TonePlayer(Protocol):
    def play(self, kind: ToneKind, volume: float) -> None: ...


class LoggingTonePlayer:
    """Tone back-end that only logs the cue"""

    def play(self, kind: ToneKind, volume: float) -> None:
        logger.info(f"[tone] {kind} at {int(volume * 100)}%")


class SoundEffects:
    """Plays tones at the current sound-effect volume"""

    def __init__(self, player: TonePlayer, settings_provider: Callable[[], AudioSettings]):
        self.player = player
        self._settings_provider = settings_provider

    def play(self, kind: ToneKind) -> None:
        self.player.play(kind, self._settings_provider().sfx_volume)

    __call__ = play

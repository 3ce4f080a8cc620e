"""
Service Container - Dependency Injection Container

Builds every store, helper and game engine over one injected key-value store
and the speech/tone/timer collaborators. Stores are created eagerly because
they depend on each other; games are lazy-loaded on first access.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

from hardman.games.memory_game import MemoryGame
from hardman.games.quiz_game import QuizGame
from hardman.services.chat_service import ChatService
from hardman.services.mission_service import MissionStore
from hardman.services.motivation_service import MotivationLoop
from hardman.services.profile_service import ProfileStore
from hardman.services.settings_service import SettingsStore
from hardman.storage.kv_store import KeyValueStore
from hardman.utils.scheduler import Scheduler
from hardman.utils.sfx import SoundEffects, TonePlayer
from hardman.utils.voice import Speaker, SpeechOutput

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """
    Simple dependency injection container for one user session.

    Infrastructure dependencies (kv_store, speech, tones, scheduler) are injected.
    """

    # Infrastructure dependencies (injected)
    kv_store: KeyValueStore
    speech: SpeechOutput
    tones: TonePlayer
    scheduler: Scheduler

    # Stores and helpers (built in __post_init__)
    profile_store: ProfileStore = field(init=False)
    settings_store: SettingsStore = field(init=False)
    mission_store: MissionStore = field(init=False)
    speaker: Speaker = field(init=False)
    sfx: SoundEffects = field(init=False)
    chat_service: ChatService = field(init=False)
    motivation: MotivationLoop = field(init=False)

    # Games (lazy-loaded via properties)
    _memory_game: Optional[MemoryGame] = field(default=None, init=False, repr=False)
    _quiz_game: Optional[QuizGame] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.profile_store = ProfileStore(self.kv_store)
        self.settings_store = SettingsStore(self.kv_store)

        def profile():
            return self.profile_store.profile

        self.mission_store = MissionStore(self.kv_store, profile)
        self.speaker = Speaker(self.speech, profile)
        self.sfx = SoundEffects(self.tones, lambda: self.settings_store.settings)
        self.chat_service = ChatService(self.speaker, profile, lambda: self.profile_store.bmi)
        self.motivation = MotivationLoop(self.speaker, self.scheduler, profile)
        self.profile_store.subscribe(self.motivation.on_profile_changed)
        logger.debug("Service container wired")

    @property
    def memory_game(self) -> MemoryGame:
        """Get MemoryGame instance (lazy-loaded)"""
        if self._memory_game is None:
            self._memory_game = MemoryGame(self.scheduler, self.sfx)
            logger.debug("MemoryGame instantiated")
        return self._memory_game

    @property
    def quiz_game(self) -> QuizGame:
        """Get QuizGame instance (lazy-loaded)"""
        if self._quiz_game is None:
            self._quiz_game = QuizGame(self.scheduler, self.sfx)
            logger.debug("QuizGame instantiated")
        return self._quiz_game

    async def load(self) -> None:
        """Read persisted profile, settings, missions and XP"""
        await self.profile_store.load()
        await self.settings_store.load()
        await self.mission_store.load()
        logger.info("Session state loaded")

    def close(self) -> None:
        """Cancel every running timer"""
        self.motivation.stop()
        if self._memory_game is not None:
            self._memory_game.close()
        if self._quiz_game is not None:
            self._quiz_game.stop()

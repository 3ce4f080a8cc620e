"""
MissionStore - Mission list and experience points

Owns the newest-first mission list and the XP counter. Every mutation runs
under one lock, notifies subscribers and persists through the injected
key-value store.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from hardman.gamification.missions import (
    MissionIdGenerator,
    decode_missions,
    encode_missions,
    has_reserved_characters,
)
from hardman.gamification.rank_system import XP_PER_MISSION, calculate_rank
from hardman.gamification.recommender import recommend_missions
from hardman.models.mission import Mission
from hardman.models.profile import Profile
from hardman.storage import keys
from hardman.storage.kv_store import KeyValueStore
from hardman.utils.observable import Observable

logger = logging.getLogger(__name__)


class MissionStore(Observable):
    """
    Observable mission list plus XP.

    Responsibilities:
    - Add missions typed by the user
    - Toggle completion and award XP on first completion
    - Prepend recommended missions
    - Persist missions and XP after every change
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        profile_provider: Callable[[], Profile],
        id_generator: Optional[MissionIdGenerator] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            kv_store: Persisted key-value store
            profile_provider: Returns the current profile (goal drives recommendations)
            id_generator: Mission id source
            now: Clock used for the time-of-day recommendation rule
        """
        super().__init__()
        self.kv = kv_store
        self._profile_provider = profile_provider
        self._ids = id_generator or MissionIdGenerator()
        self._now = now
        self._missions: List[Mission] = []
        self._xp = 0
        self._lock = asyncio.Lock()

    @property
    def missions(self) -> List[Mission]:
        return list(self._missions)

    @property
    def xp(self) -> int:
        return self._xp

    @property
    def rank(self) -> Tuple[str, int]:
        return calculate_rank(self._xp)

    def get_mission(self, mission_id: int) -> Optional[Mission]:
        return next((m for m in self._missions if m.id == mission_id), None)

    async def load(self) -> None:
        """Read missions and XP; bad stored values fall back to empty/zero"""
        raw = await self.kv.get(keys.MISSIONS)
        xp = await self.kv.get_int(keys.EXPERIENCE_POINTS, 0)

        async with self._lock:
            self._missions = decode_missions(raw)
            self._xp = max(xp, 0)
            self._ids.seed(m.id for m in self._missions)
        logger.info(f"Loaded {len(self._missions)} missions, {self._xp} XP")
        self._notify()

    async def add_mission(self, title: str) -> Optional[Mission]:
        """
        Add a mission on top of the list

        Returns:
            The new mission, or None when the title is blank or contains ';' or '|'
        """
        title = (title or "").strip()
        if not title:
            logger.debug("Ignoring blank mission title")
            return None
        if has_reserved_characters(title):
            logger.warning(f"Rejecting mission title with reserved characters: {title!r}")
            return None

        async with self._lock:
            mission = Mission(id=self._ids.next_id(), title=title, done=False)
            self._missions.insert(0, mission)
            self._notify()
            await self._save_missions()

        logger.info(f"Added mission {mission.id}: {title}")
        return mission

    async def toggle_mission(self, mission_id: int) -> Optional[Mission]:
        """
        Flip a mission's done flag

        Completing a mission awards XP_PER_MISSION; re-opening it does not
        take XP back.

        Returns:
            The updated mission, or None if the id is unknown
        """
        async with self._lock:
            index = next((i for i, m in enumerate(self._missions) if m.id == mission_id), None)
            if index is None:
                logger.debug(f"Toggle ignored, unknown mission id {mission_id}")
                return None

            current = self._missions[index]
            toggled = current.model_copy(update={"done": not current.done})
            self._missions[index] = toggled

            completed = not current.done
            if completed:
                old_level = calculate_rank(self._xp)[1]
                self._xp += XP_PER_MISSION

            self._notify()
            await self._save_missions()
            if completed:
                await self.kv.set(keys.EXPERIENCE_POINTS, self._xp)

        if completed:
            rank, level = calculate_rank(self._xp)
            logger.info(f"Mission {mission_id} completed: +{XP_PER_MISSION} XP (total {self._xp})")
            if level > old_level:
                logger.info(f"Promoted to {rank} (level {level})")
        return toggled

    async def recommend_missions(self) -> List[Mission]:
        """Prepend suggestions for the profile goal and current hour"""
        goal = self._profile_provider().goal
        hour = self._now().hour

        async with self._lock:
            suggestions = recommend_missions(goal, hour, self._ids.next_id)
            self._missions = suggestions + self._missions
            self._notify()
            await self._save_missions()
        return suggestions

    async def _save_missions(self) -> None:
        await self.kv.set(keys.MISSIONS, encode_missions(self._missions))

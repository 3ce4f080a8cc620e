"""
Memory matching game

4x4 grid, 8 symbols each placed twice. Flipping a second cell resolves the
pair: a match stays face-up, a miss is shown for MEMORY_MISMATCH_DELAY_MS and
then hidden. Once every cell is matched the game reshuffles after
MEMORY_RESET_DELAY_MS.
"""

import logging
import random
from typing import List, Optional, Sequence, Set

from hardman.config import MEMORY_MISMATCH_DELAY_MS, MEMORY_RESET_DELAY_MS
from hardman.models.games import MemoryGameState
from hardman.utils.observable import Observable
from hardman.utils.scheduler import Scheduler, TimerHandle, cancel_timer
from hardman.utils.sfx import SoundEffects

logger = logging.getLogger(__name__)

SYMBOLS = ["🪖", "🔫", "🧨", "🛡️", "🪙", "✈️", "🛰️", "🚁"]
PAIRS = 8


def shuffle_pairs(symbols: Sequence[str], rng: random.Random) -> List[str]:
    """Pick PAIRS symbols, duplicate them and shuffle the 16 cells"""
    taken = rng.sample(list(symbols), PAIRS)
    deck = taken + taken
    rng.shuffle(deck)
    return deck


class MemoryGame(Observable):
    """State machine for the tile-matching minigame"""

    def __init__(
        self,
        scheduler: Scheduler,
        sfx: SoundEffects,
        rng: Optional[random.Random] = None,
        symbols: Sequence[str] = SYMBOLS,
    ):
        super().__init__()
        self.scheduler = scheduler
        self.sfx = sfx
        self.rng = rng or random.Random()
        self.symbols = list(symbols)
        self._deck: List[str] = []
        self._open: List[int] = []
        self._matched: Set[int] = set()
        self._moves = 0
        self._hide_handle: Optional[TimerHandle] = None
        self._reset_handle: Optional[TimerHandle] = None
        self._reset()

    @property
    def state(self) -> MemoryGameState:
        return MemoryGameState(
            deck=list(self._deck),
            open_indices=list(self._open),
            matched_indices=sorted(self._matched),
            move_count=self._moves,
        )

    def is_face_up(self, index: int) -> bool:
        return index in self._open or index in self._matched

    def flip(self, index: int) -> bool:
        """
        Turn a cell face-up

        Returns:
            True if the cell was opened, False if the flip was ignored
        """
        if not 0 <= index < len(self._deck):
            logger.debug(f"Flip ignored, index {index} out of range")
            return False
        if self.is_face_up(index) or len(self._open) >= 2:
            return False

        self._open.append(index)
        if len(self._open) == 2:
            self._resolve()
        self._notify()
        return True

    def new_game(self) -> None:
        """Reshuffle right away, dropping any pending timers"""
        self._reset()
        self._notify()

    def close(self) -> None:
        """
        Cancel pending timers (game screen left)

        Whatever a cancelled timer was due to resolve is settled right away: a
        shown mismatch is hidden and a cleared board is reshuffled.
        """
        hide_pending = self._hide_handle is not None
        reset_pending = self._reset_handle is not None
        self._cancel_timers()

        if reset_pending:
            self._reset()
        elif hide_pending:
            self._open = []
        else:
            return
        self._notify()

    def _cancel_timers(self) -> None:
        cancel_timer(self._hide_handle)
        cancel_timer(self._reset_handle)
        self._hide_handle = None
        self._reset_handle = None

    def _resolve(self) -> None:
        first, second = self._open
        self._moves += 1

        if self._deck[first] == self._deck[second]:
            self._matched.update((first, second))
            self._open = []
            self.sfx.play("success")
            if len(self._matched) == len(self._deck):
                logger.info(f"Memory game cleared in {self._moves} moves")
                self._reset_handle = self.scheduler.schedule(MEMORY_RESET_DELAY_MS, self._on_reset_timer)
        else:
            self.sfx.play("error")
            self._hide_handle = self.scheduler.schedule(MEMORY_MISMATCH_DELAY_MS, self._on_hide_timer)

    def _on_hide_timer(self) -> None:
        self._hide_handle = None
        self._open = []
        self._notify()

    def _on_reset_timer(self) -> None:
        self._reset_handle = None
        self._reset()
        self._notify()

    def _reset(self) -> None:
        self._cancel_timers()
        self._deck = shuffle_pairs(self.symbols, self.rng)
        self._open = []
        self._matched = set()
        self._moves = 0

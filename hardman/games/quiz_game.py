"""
Timed riddle quiz

The question for a level is QUESTION_BANK[level % len(QUESTION_BANK)]. Each
level gets 25 - min(2 * level, 15) seconds. A right answer scores 10 and
climbs a level; a wrong one drops a level (never below 1) and clears the
score; running out of time sends the player back to level 1.
"""

import logging
from typing import List, Optional, Sequence

from hardman.config import QUIZ_TICK_MS
from hardman.models.games import QuizQuestion, QuizState
from hardman.utils.observable import Observable
from hardman.utils.scheduler import Scheduler, TimerHandle, cancel_timer
from hardman.utils.sfx import SoundEffects

logger = logging.getLogger(__name__)

BASE_TIME_SECONDS = 25
MAX_TIME_REDUCTION = 15
POINTS_PER_ANSWER = 10

QUESTION_BANK: List[QuizQuestion] = [
    QuizQuestion(
        text="There are 5 chairs in a row. One soldier sits in the first and another in the last. "
             "How many free chairs are left between them?",
        options=["3", "2", "4", "0"],
        correct_index=0,
    ),
    QuizQuestion(
        text="A convoy takes 10 min to cross a tunnel. If it doubles its speed, how long does it take?",
        options=["5 min", "10 min", "20 min", "Impossible to know"],
        correct_index=0,
    ),
    QuizQuestion(
        text="Sequence: 2, 6, 12, 20, what comes next?",
        options=["30", "28", "24", "32"],
        correct_index=0,
    ),
    QuizQuestion(
        text="I have teeth but never bite; mechanics use me.",
        options=["Wrench", "Saw", "Comb", "Tank"],
        correct_index=1,
    ),
    QuizQuestion(
        text="Not a soldier, yet I always come in formation. Break me and I burst. What am I?",
        options=["Egg", "Grenade", "Line", "Row"],
        correct_index=0,
    ),
]


def time_for_level(level: int) -> int:
    """Countdown length in seconds for a level"""
    return BASE_TIME_SECONDS - min(level * 2, MAX_TIME_REDUCTION)


def question_for_level(level: int, bank: Sequence[QuizQuestion] = QUESTION_BANK) -> QuizQuestion:
    return bank[level % len(bank)]


class QuizGame(Observable):
    """State machine for the timed quiz"""

    def __init__(
        self,
        scheduler: Scheduler,
        sfx: SoundEffects,
        bank: Sequence[QuizQuestion] = QUESTION_BANK,
    ):
        super().__init__()
        self.scheduler = scheduler
        self.sfx = sfx
        self.bank = list(bank)
        self.level = 1
        self.score = 0
        self.question = question_for_level(self.level, self.bank)
        self.time_remaining = time_for_level(self.level)
        self._handle: Optional[TimerHandle] = None
        self._running = False

    @property
    def state(self) -> QuizState:
        return QuizState(
            level=self.level,
            score=self.score,
            question=self.question,
            time_remaining=self.time_remaining,
            running=self._running,
        )

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin (or restart) the countdown for the current level"""
        self._running = True
        self._enter_level(self.level)

    def stop(self) -> None:
        """Pause the countdown"""
        self._running = False
        cancel_timer(self._handle)
        self._handle = None

    def answer(self, option_index: int) -> Optional[bool]:
        """
        Submit an option for the current question

        Returns:
            True if correct, False if wrong, None if the index is not an option
        """
        if not 0 <= option_index < len(self.question.options):
            logger.debug(f"Answer ignored, option {option_index} out of range")
            return None

        correct = option_index == self.question.correct_index
        if correct:
            self.sfx.play("success")
            self.score += POINTS_PER_ANSWER
            new_level = self.level + 1
        else:
            self.sfx.play("error")
            self.score = 0
            new_level = max(self.level - 1, 1)

        logger.debug(f"Quiz answer {'correct' if correct else 'wrong'}: level {self.level} -> {new_level}")
        self._enter_level(new_level)
        return correct

    def _enter_level(self, level: int) -> None:
        cancel_timer(self._handle)
        self._handle = None
        self.level = level
        self.question = question_for_level(level, self.bank)
        self.time_remaining = time_for_level(level)
        if self._running:
            self._handle = self.scheduler.schedule(QUIZ_TICK_MS, self._tick)
        self._notify()

    def _tick(self) -> None:
        self._handle = None
        if not self._running:
            return
        self.time_remaining = max(self.time_remaining - 1, 0)
        if self.time_remaining == 0:
            self._timeout()
            return
        self._handle = self.scheduler.schedule(QUIZ_TICK_MS, self._tick)
        self._notify()

    def _timeout(self) -> None:
        logger.info(f"Quiz timed out at level {self.level}, back to level 1")
        self.sfx.play("timeout")
        self.score = 0
        self._enter_level(1)

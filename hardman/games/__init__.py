"""Minigames: memory matching and timed quiz"""

from hardman.games.memory_game import MemoryGame
from hardman.games.quiz_game import QuizGame

__all__ = ["MemoryGame", "QuizGame"]

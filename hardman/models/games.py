"""Pydantic models for the minigames"""
from typing import List

from pydantic import BaseModel, Field, model_validator


class QuizQuestion(BaseModel):
    """Multiple-choice question with exactly four options"""

    text: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_index: int = Field(ge=0, le=3)


class QuizState(BaseModel):
    """Snapshot of the quiz game"""

    level: int = Field(ge=1)
    score: int = Field(ge=0)
    question: QuizQuestion
    time_remaining: int = Field(ge=0)
    running: bool = False


class MemoryGameState(BaseModel):
    """Snapshot of the memory-matching game"""

    deck: List[str]
    open_indices: List[int] = Field(default_factory=list, max_length=2)
    matched_indices: List[int] = Field(default_factory=list)
    move_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_indices(self):
        for index in self.open_indices + self.matched_indices:
            if not 0 <= index < len(self.deck):
                raise ValueError(f"Cell index {index} outside deck of {len(self.deck)}")
        return self

    @property
    def is_complete(self) -> bool:
        """All cells matched"""
        return len(self.matched_indices) == len(self.deck)

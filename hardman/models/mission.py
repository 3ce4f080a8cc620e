"""Mission and chat models"""
from typing import Literal

from pydantic import BaseModel


class Mission(BaseModel):
    """A user-tracked to-do item that awards XP once completed"""
    id: int
    title: str
    done: bool = False


class ChatMessage(BaseModel):
    """One entry of the assistant chat transcript"""
    role: Literal["assistant", "user"]
    text: str

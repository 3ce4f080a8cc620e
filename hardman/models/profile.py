"""Profile-related Pydantic models"""
import logging
from typing import Literal, get_args

from pydantic import BaseModel, field_validator

from hardman.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

Goal = Literal["reduce", "muscle", "body"]
Intensity = Literal["moderate", "firm", "hard"]
VoiceTone = Literal["soft", "firm", "military"]

PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "country",
    "birth_year",
    "weight_kg",
    "height_cm",
    "goal",
    "intensity",
    "voice_tone",
    "language_tag",
)


def _coerce_choice(value, allowed, default: str, field: str) -> str:
    if value in get_args(allowed):
        return value
    if value not in (None, ""):
        logger.warning(f"Unknown {field} '{value}', using '{default}'")
    return default


class Profile(BaseModel):
    """User profile as entered on the registration form.

    Numeric fields stay free-form strings; parsing happens where they are
    used (see hardman.utils.bmi).
    """
    first_name: str = ""
    last_name: str = ""
    country: str = ""
    birth_year: str = ""
    weight_kg: str = ""
    height_cm: str = ""
    goal: Goal = "reduce"
    intensity: Intensity = "firm"
    voice_tone: VoiceTone = "firm"
    language_tag: str = DEFAULT_LANGUAGE

    @field_validator("goal", mode="before")
    @classmethod
    def coerce_goal(cls, v):
        return _coerce_choice(v, Goal, "reduce", "goal")

    @field_validator("intensity", mode="before")
    @classmethod
    def coerce_intensity(cls, v):
        return _coerce_choice(v, Intensity, "firm", "intensity")

    @field_validator("voice_tone", mode="before")
    @classmethod
    def coerce_voice_tone(cls, v):
        return _coerce_choice(v, VoiceTone, "firm", "voice_tone")

    @field_validator("language_tag", mode="before")
    @classmethod
    def default_language(cls, v):
        return v or DEFAULT_LANGUAGE

    @property
    def is_registered(self) -> bool:
        """Check if the registration form has a full name"""
        return bool(self.first_name.strip()) and bool(self.last_name.strip())

"""Audio settings and BMI assessment models"""
from typing import Optional

from pydantic import BaseModel, Field

from hardman.config import DEFAULT_VOICE_VOLUME, DEFAULT_SFX_VOLUME


class AudioSettings(BaseModel):
    """Voice and sound-effect volumes (0..1)"""
    voice_volume: float = Field(default=DEFAULT_VOICE_VOLUME, ge=0.0, le=1.0)
    sfx_volume: float = Field(default=DEFAULT_SFX_VOLUME, ge=0.0, le=1.0)


class BmiAssessment(BaseModel):
    """BMI value with its display label, gauge color and gauge fill"""
    value: Optional[float] = None
    label: str
    color: str
    gauge: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def is_determined(self) -> bool:
        return self.value is not None

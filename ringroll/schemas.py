"""Pydantic request and response models for the roll API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ringroll.config import settings
from ringroll.dice import DieType


class RollBody(BaseModel):
    ring_count: int = Field(default=1, ge=0, le=settings.max_pool_size)
    skill_count: int = Field(default=0, ge=0, le=settings.max_pool_size)


class BonusBody(BaseModel):
    die_type: DieType


class Preferences(BaseModel):
    online: bool = Field(
        default=False, description="Ask random.org for draws before the local generator."
    )
    sound: bool = Field(default=False, description="Fire the roll feedback cue on every roll.")


class RollState(BaseModel):
    primary: list[str] = Field(description="Face labels of the main roll, ring dice first.")
    bonus: list[str] = Field(description="Face labels of dice added after the main roll.")
    play_sound: bool = Field(
        default=False,
        description="True when the UI should play its roll cue for this response.",
    )

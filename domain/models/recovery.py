"""
Recovery value objects.

FatigueEvents are produced once per completed session per muscle group and
never mutated. MuscleRecoveryStatus is derived on demand from events and is
never persisted.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.muscle_group import MuscleGroup, MuscleGroupCategory


class RecoveryStatusLevel(str, Enum):
    """Recovery bucket for a muscle group."""

    FATIGUED = "fatigued"  # < 50%
    RECOVERING = "recovering"  # 50-79%
    FRESH = "fresh"  # >= 80%


class FatigueEvent(BaseModel):
    """Training load applied to one muscle group in one session."""

    muscle_group: MuscleGroup
    volume_load: float = Field(..., ge=0, description="e.g. kg x reps, split-weighted")
    workout_date: datetime

    model_config = {"frozen": True}


class MuscleRecoveryStatus(BaseModel):
    """Recovery state of a muscle group at a point in time."""

    muscle_group: MuscleGroup
    category: MuscleGroupCategory
    recovery_percentage: int = Field(..., ge=0, le=100)
    status: RecoveryStatusLevel
    last_workout_date: Optional[datetime] = None
    hours_until_fresh: Optional[int] = Field(
        default=None,
        description="Advisory estimate (single effective tau), None if already fresh",
    )

    model_config = {"frozen": True}

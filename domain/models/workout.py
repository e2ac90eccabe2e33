"""
Completed workout session - training history as read from storage.

Only what recovery and volume accounting need is modelled here: which
exercises were performed and which of their sets were actually completed.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise


class WorkoutSet(BaseModel):
    """A single logged set."""

    set_number: int = Field(..., ge=1)
    reps: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0, description="kg")
    is_completed: bool = False
    is_warmup: bool = False

    @property
    def counts_as_working_set(self) -> bool:
        """Completed, non-warm-up sets are the ones that produce fatigue."""
        return self.is_completed and not self.is_warmup

    model_config = {"frozen": True}


class CompletedExercise(BaseModel):
    """An exercise within a session together with its logged sets."""

    exercise: Exercise
    sets: List[WorkoutSet] = Field(default_factory=list)
    order_index: int = Field(default=0, ge=0)

    @property
    def completed_set_count(self) -> int:
        return sum(1 for s in self.sets if s.is_completed)

    model_config = {"frozen": True}


class WorkoutSession(BaseModel):
    """
    A finished workout.

    Examples:
        >>> session = WorkoutSession(
        ...     workout_id="w-1",
        ...     started_at=datetime(2025, 1, 6, 18, 0),
        ...     exercises=[],
        ... )
        >>> session.exercises
        []
    """

    workout_id: str
    name: Optional[str] = None
    started_at: datetime
    ended_at: Optional[datetime] = None
    exercises: List[CompletedExercise] = Field(default_factory=list)

    model_config = {"frozen": True}

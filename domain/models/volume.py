"""
Weekly volume value objects.

A WeeklyVolumeTracker is rebuilt per request from completed-set history. It is
never stored: ``remaining_volume`` is always derived from targets and current
volume at construction.
"""

from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from domain.models.muscle_group import MuscleGroup


class VolumeTarget(BaseModel):
    """Weekly working-set range for a muscle group."""

    muscle_group: MuscleGroup
    min_sets: int = Field(..., ge=0)
    max_sets: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_range(self) -> "VolumeTarget":
        if self.max_sets < self.min_sets:
            raise ValueError(
                f"max_sets ({self.max_sets}) must be >= min_sets ({self.min_sets}) "
                f"for {self.muscle_group.value}"
            )
        return self

    model_config = {"frozen": True}


DEFAULT_VOLUME_TARGETS: Sequence[VolumeTarget] = tuple(
    VolumeTarget(muscle_group=mg, min_sets=lo, max_sets=hi)
    for mg, lo, hi in (
        (MuscleGroup.PECS, 12, 16),
        (MuscleGroup.LATS, 14, 18),
        (MuscleGroup.TRAPEZES, 14, 18),
        (MuscleGroup.DELTS, 12, 16),
        (MuscleGroup.BICEPS, 8, 12),
        (MuscleGroup.TRICEPS, 8, 12),
        (MuscleGroup.QUADS, 12, 16),
        (MuscleGroup.ARMSTRINGS, 12, 16),
        (MuscleGroup.GLUTES, 12, 16),
        (MuscleGroup.CALVES, 8, 12),
        (MuscleGroup.ABS, 6, 10),
    )
)


class WeeklyVolumeTracker(BaseModel):
    """Completed sets per muscle group for one Monday-start week."""

    week_start: datetime
    targets: List[VolumeTarget]
    current_volume: Dict[MuscleGroup, float] = Field(default_factory=dict)
    remaining_volume: Dict[MuscleGroup, float] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        week_start: datetime,
        current_volume: Optional[Mapping[MuscleGroup, float]] = None,
        targets: Optional[Sequence[VolumeTarget]] = None,
    ) -> "WeeklyVolumeTracker":
        """
        Build a tracker and derive remaining volume.

        remaining[mg] = max(0, target.min_sets - current[mg]) for every target.
        """
        targets = list(targets if targets is not None else DEFAULT_VOLUME_TARGETS)
        current = dict(current_volume or {})
        remaining = {
            target.muscle_group: max(0.0, target.min_sets - current.get(target.muscle_group, 0.0))
            for target in targets
        }
        return cls(
            week_start=week_start,
            targets=targets,
            current_volume=current,
            remaining_volume=remaining,
        )

    def update_volume(self, volumes: Mapping[MuscleGroup, float]) -> "WeeklyVolumeTracker":
        """Return a new tracker with ``volumes`` added to the current volume."""
        current = dict(self.current_volume)
        for muscle_group, sets in volumes.items():
            current[muscle_group] = current.get(muscle_group, 0.0) + sets
        return WeeklyVolumeTracker.create(
            week_start=self.week_start,
            current_volume=current,
            targets=self.targets,
        )

    @property
    def volume_needs(self) -> Dict[MuscleGroup, float]:
        """Remaining-set debt per targeted muscle group."""
        return dict(self.remaining_volume)

    @property
    def excess_volume(self) -> Dict[MuscleGroup, float]:
        """Sets above max_sets, only for muscle groups over their range."""
        excess = {}
        for target in self.targets:
            over = self.current_volume.get(target.muscle_group, 0.0) - target.max_sets
            if over > 0:
                excess[target.muscle_group] = over
        return excess

    model_config = {"frozen": True}


class WeeklyProgress(BaseModel):
    """Progress of a week against its minimum targets."""

    tracker: WeeklyVolumeTracker
    progress_percentage: Dict[MuscleGroup, float]
    is_on_track: bool

    model_config = {"frozen": True}

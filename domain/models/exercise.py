"""
Exercise catalog value objects.

An exercise carries its equipment kind (``type``), its coarse movement pattern
and, through ExerciseMuscleGroups, the percentage split of work across muscle
groups. Splits must total 100 unless explicitly normalized at construction.

Examples:
    >>> bench = Exercise(
    ...     id="db-bench",
    ...     name="Dumbbell Bench Press",
    ...     type=ExerciseType.DUMBBELLS,
    ...     movement_pattern=MovementPattern.PUSH,
    ... )
    >>> entry = ExerciseMuscleGroups.create(
    ...     bench,
    ...     [
    ...         MuscleGroupSplit(muscle_group=MuscleGroup.PECS, split=60),
    ...         MuscleGroupSplit(muscle_group=MuscleGroup.TRICEPS, split=40),
    ...     ],
    ... )
    >>> entry.primary_muscle_group
    <MuscleGroup.PECS: 'pecs'>
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, model_validator

from domain.models.muscle_group import MuscleGroup


class ExerciseType(str, Enum):
    """Equipment kind an exercise is performed with."""

    BARBELL = "barbell"
    BODYWEIGHT = "bodyweight"
    CABLE = "cable"
    DUMBBELLS = "dumbbells"
    MACHINE = "machine"


class MovementPattern(str, Enum):
    """Coarse exercise classification used for session variety and volume."""

    PUSH = "push"
    PULL = "pull"
    SQUAT = "squat"
    HINGE = "hinge"
    CORE = "core"
    ROTATION = "rotation"
    GAIT = "gait"
    ISOLATION = "isolation"


# Cables > free weights > machines. Legs preferences live in the catalog.
EQUIPMENT_PREFERENCES: Mapping[ExerciseType, int] = MappingProxyType(
    {
        ExerciseType.CABLE: 4,
        ExerciseType.DUMBBELLS: 3,
        ExerciseType.BODYWEIGHT: 3,
        ExerciseType.BARBELL: 2,
        ExerciseType.MACHINE: 1,
    }
)

# Pattern-level attribution used by volume tracking and generation.
# Isolation gets no credit under this coarse mapping.
PATTERN_PRIMARY_MUSCLE_GROUPS: Mapping[MovementPattern, Tuple[MuscleGroup, ...]] = MappingProxyType(
    {
        MovementPattern.PUSH: (MuscleGroup.PECS, MuscleGroup.DELTS, MuscleGroup.TRICEPS),
        MovementPattern.PULL: (MuscleGroup.LATS, MuscleGroup.TRAPEZES, MuscleGroup.BICEPS),
        MovementPattern.SQUAT: (MuscleGroup.QUADS, MuscleGroup.GLUTES),
        MovementPattern.HINGE: (MuscleGroup.ARMSTRINGS, MuscleGroup.GLUTES, MuscleGroup.LOWER_BACK),
        MovementPattern.CORE: (MuscleGroup.ABS,),
        MovementPattern.ROTATION: (MuscleGroup.ABS,),
        MovementPattern.GAIT: (MuscleGroup.CALVES, MuscleGroup.QUADS),
        MovementPattern.ISOLATION: (),
    }
)


class Exercise(BaseModel):
    """A catalog exercise, maintained by the external catalog."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: ExerciseType = Field(..., description="Equipment kind")
    movement_pattern: MovementPattern
    description: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.type.value}, {self.movement_pattern.value})"

    model_config = {"frozen": True}


class MuscleGroupSplit(BaseModel):
    """Share of an exercise's work attributed to one muscle group (percent)."""

    muscle_group: MuscleGroup
    split: float = Field(..., ge=0, le=100)

    model_config = {"frozen": True}


class ExerciseMuscleGroups(BaseModel):
    """
    An exercise with its muscle-group split breakdown.

    Invariants (checked on construction):
    - splits total 100
    - a muscle group appears at most once
    """

    exercise: Exercise
    muscle_group_splits: List[MuscleGroupSplit] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_splits(self) -> "ExerciseMuscleGroups":
        seen = set()
        for entry in self.muscle_group_splits:
            if entry.muscle_group in seen:
                raise ValueError(
                    f"Duplicate muscle group '{entry.muscle_group.value}' "
                    f"in splits for exercise {self.exercise.id}"
                )
            seen.add(entry.muscle_group)

        total = sum(entry.split for entry in self.muscle_group_splits)
        if not math.isclose(total, 100.0, abs_tol=1e-6):
            raise ValueError(
                f"Invalid total split for exercise {self.exercise.id}: "
                f"{total:g} (expected 100)"
            )
        return self

    @classmethod
    def create(
        cls,
        exercise: Exercise,
        muscle_group_splits: Sequence[MuscleGroupSplit],
        normalize: bool = False,
    ) -> "ExerciseMuscleGroups":
        """
        Build an entry, optionally rescaling splits so they total 100.

        Normalized splits are whole percentages; rounding leftovers go to the
        entries with the largest fractional parts so the total stays exact.

        Args:
            exercise: The catalog exercise
            muscle_group_splits: Raw splits, in catalog order
            normalize: Rescale instead of rejecting a total other than 100

        Returns:
            A validated ExerciseMuscleGroups

        Raises:
            ValueError: If normalization is requested for a zero total
            pydantic.ValidationError: If splits do not total 100
        """
        splits = list(muscle_group_splits)
        if normalize:
            splits = _normalize_splits(splits)
        return cls(exercise=exercise, muscle_group_splits=splits)

    @property
    def primary_muscle_group(self) -> Optional[MuscleGroup]:
        """Muscle group with the largest split (first wins on ties)."""
        best: Optional[MuscleGroupSplit] = None
        for entry in self.muscle_group_splits:
            if best is None or entry.split > best.split:
                best = entry
        return best.muscle_group if best else None

    def split_for(self, muscle_group: MuscleGroup) -> float:
        """Split percentage for a muscle group (0 if not worked)."""
        for entry in self.muscle_group_splits:
            if entry.muscle_group == muscle_group:
                return entry.split
        return 0.0

    model_config = {"frozen": True}


def _normalize_splits(splits: List[MuscleGroupSplit]) -> List[MuscleGroupSplit]:
    total = sum(entry.split for entry in splits)
    if total <= 0:
        raise ValueError("Cannot normalize muscle group splits with a zero total")

    scaled = [100.0 * entry.split / total for entry in splits]
    floors = [math.floor(value) for value in scaled]
    leftover = 100 - sum(floors)

    by_remainder = sorted(
        range(len(scaled)),
        key=lambda i: (-(scaled[i] - floors[i]), i),
    )
    for i in by_remainder[:leftover]:
        floors[i] += 1

    return [
        MuscleGroupSplit(muscle_group=entry.muscle_group, split=floors[i])
        for i, entry in enumerate(splits)
    ]

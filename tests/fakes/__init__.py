"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeExerciseCatalogRepository, create_catalog

    repo = FakeExerciseCatalogRepository(create_catalog())
"""
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from domain.models import (
    PATTERN_PRIMARY_MUSCLE_GROUPS,
    CompletedExercise,
    EquipmentInstance,
    Exercise,
    ExerciseMuscleGroups,
    ExerciseType,
    MovementPattern,
    MuscleGroup,
    MuscleGroupSplit,
    SubstituteCandidate,
    WorkoutSession,
    WorkoutSet,
)

from tests.fakes.exercise_catalog_repository import FakeExerciseCatalogRepository
from tests.fakes.equipment_repository import FakeEquipmentRepository
from tests.fakes.training_history_repository import FakeTrainingHistoryRepository
from tests.fakes.substitution_repository import FakeSubstitutionRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercise(
    exercise_id: str,
    exercise_type: ExerciseType,
    pattern: MovementPattern,
    splits: Optional[Dict[MuscleGroup, float]] = None,
    name: Optional[str] = None,
) -> ExerciseMuscleGroups:
    """
    Build a catalog entry.

    Without explicit splits, the pattern's primary muscle groups share the
    work evenly (biceps for isolation).
    """
    if splits is None:
        groups = PATTERN_PRIMARY_MUSCLE_GROUPS[pattern] or (MuscleGroup.BICEPS,)
        splits = {mg: 1 for mg in groups}
    return ExerciseMuscleGroups.create(
        exercise=Exercise(
            id=exercise_id,
            name=name or exercise_id.replace("-", " ").title(),
            type=exercise_type,
            movement_pattern=pattern,
        ),
        muscle_group_splits=[
            MuscleGroupSplit(muscle_group=mg, split=split) for mg, split in splits.items()
        ],
        normalize=True,
    )


def make_equipment(
    equipment_id: str,
    exercise_type: ExerciseType,
    floor: str = "floor-1",
    is_available: bool = True,
) -> EquipmentInstance:
    return EquipmentInstance(
        id=equipment_id,
        name=equipment_id,
        exercise_type=exercise_type,
        gym_floor_id=floor,
        is_available=is_available,
    )


def make_candidate(
    entry: ExerciseMuscleGroups,
    similarity: float = 0.8,
    overlap: float = 90,
    difficulty_delta: float = 0,
) -> SubstituteCandidate:
    return SubstituteCandidate(
        exercise=entry,
        similarity_score=similarity,
        muscle_overlap_percentage=overlap,
        difficulty_delta=difficulty_delta,
    )


def make_session(
    started_at: datetime,
    exercises: Sequence[ExerciseMuscleGroups],
    completed_sets: int = 3,
    warmup_sets: int = 0,
    workout_id: str = "w1",
) -> WorkoutSession:
    """A session where every exercise has ``completed_sets`` done working sets."""
    groups = []
    for index, entry in enumerate(exercises):
        sets = [
            WorkoutSet(set_number=n + 1, reps=10, weight=20, is_completed=True, is_warmup=True)
            for n in range(warmup_sets)
        ]
        sets += [
            WorkoutSet(
                set_number=warmup_sets + n + 1,
                reps=10,
                weight=50,
                is_completed=True,
            )
            for n in range(completed_sets)
        ]
        groups.append(CompletedExercise(exercise=entry.exercise, sets=sets, order_index=index))
    return WorkoutSession(workout_id=workout_id, started_at=started_at, exercises=groups)


def create_catalog() -> List[ExerciseMuscleGroups]:
    """A small mixed-equipment catalog, in catalog order."""
    return [
        make_exercise("db-bench-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH,
                      {MuscleGroup.PECS: 60, MuscleGroup.DELTS: 20, MuscleGroup.TRICEPS: 20}),
        make_exercise("cable-row", ExerciseType.CABLE, MovementPattern.PULL,
                      {MuscleGroup.LATS: 60, MuscleGroup.TRAPEZES: 20, MuscleGroup.BICEPS: 20}),
        make_exercise("goblet-squat", ExerciseType.DUMBBELLS, MovementPattern.SQUAT,
                      {MuscleGroup.QUADS: 70, MuscleGroup.GLUTES: 30}),
        make_exercise("bb-deadlift", ExerciseType.BARBELL, MovementPattern.HINGE,
                      {MuscleGroup.ARMSTRINGS: 40, MuscleGroup.GLUTES: 30, MuscleGroup.LOWER_BACK: 30}),
        make_exercise("cable-crunch", ExerciseType.CABLE, MovementPattern.CORE,
                      {MuscleGroup.ABS: 100}),
        make_exercise("db-shoulder-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH,
                      {MuscleGroup.DELTS: 60, MuscleGroup.TRICEPS: 40}),
        make_exercise("machine-chest-press", ExerciseType.MACHINE, MovementPattern.PUSH,
                      {MuscleGroup.PECS: 70, MuscleGroup.TRICEPS: 30}),
        make_exercise("push-up", ExerciseType.BODYWEIGHT, MovementPattern.PUSH,
                      {MuscleGroup.PECS: 60, MuscleGroup.DELTS: 20, MuscleGroup.TRICEPS: 20}),
        make_exercise("db-row", ExerciseType.DUMBBELLS, MovementPattern.PULL,
                      {MuscleGroup.LATS: 70, MuscleGroup.BICEPS: 30}),
        make_exercise("bb-back-squat", ExerciseType.BARBELL, MovementPattern.SQUAT,
                      {MuscleGroup.QUADS: 60, MuscleGroup.GLUTES: 40}),
    ]


__all__ = [
    "FakeExerciseCatalogRepository",
    "FakeEquipmentRepository",
    "FakeTrainingHistoryRepository",
    "FakeSubstitutionRepository",
    "make_exercise",
    "make_equipment",
    "make_candidate",
    "make_session",
    "create_catalog",
]

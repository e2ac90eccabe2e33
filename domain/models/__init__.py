"""
Domain models for the adaptive training engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core training concepts:
- MuscleGroup: the 13 tracked muscle groups and their reference data
- Exercise / ExerciseMuscleGroups: catalog entries with muscle-group splits
- EquipmentInstance: equipment on a gym floor
- FatigueEvent / MuscleRecoveryStatus: recovery inputs and derived state
- WeeklyVolumeTracker: completed sets vs weekly targets
- WorkoutSession: completed training history
- AdaptiveWorkoutRequest / AdaptiveWorkoutResult: generator contract

Usage:
    >>> from domain.models import Exercise, ExerciseType, MovementPattern

    >>> row = Exercise(
    ...     id="cable-row",
    ...     name="Seated Cable Row",
    ...     type=ExerciseType.CABLE,
    ...     movement_pattern=MovementPattern.PULL,
    ... )

    >>> # Serialize to JSON
    >>> json_str = row.model_dump_json()
"""

from domain.models.adaptive import (
    AdaptiveWorkoutRequest,
    AdaptiveWorkoutResult,
    SelectedExercise,
    SequenceRecommendation,
    SequenceValidation,
    SubstituteCandidate,
    SubstitutionError,
    WorkoutGenerationError,
)
from domain.models.equipment import (
    EquipmentInstance,
    available_exercise_types,
    available_instances,
)
from domain.models.exercise import (
    EQUIPMENT_PREFERENCES,
    PATTERN_PRIMARY_MUSCLE_GROUPS,
    Exercise,
    ExerciseMuscleGroups,
    ExerciseType,
    MovementPattern,
    MuscleGroupSplit,
)
from domain.models.muscle_group import (
    BASE_TIME_CONSTANTS,
    MUSCLE_GROUP_CATEGORIES,
    MuscleGroup,
    MuscleGroupCategory,
    parse_muscle_group,
)
from domain.models.recovery import (
    FatigueEvent,
    MuscleRecoveryStatus,
    RecoveryStatusLevel,
)
from domain.models.volume import (
    DEFAULT_VOLUME_TARGETS,
    VolumeTarget,
    WeeklyProgress,
    WeeklyVolumeTracker,
)
from domain.models.workout import CompletedExercise, WorkoutSession, WorkoutSet

__all__ = [
    # Reference data
    "MuscleGroup",
    "MuscleGroupCategory",
    "MUSCLE_GROUP_CATEGORIES",
    "BASE_TIME_CONSTANTS",
    "parse_muscle_group",
    "ExerciseType",
    "MovementPattern",
    "EQUIPMENT_PREFERENCES",
    "PATTERN_PRIMARY_MUSCLE_GROUPS",
    "DEFAULT_VOLUME_TARGETS",
    # Catalog
    "Exercise",
    "ExerciseMuscleGroups",
    "MuscleGroupSplit",
    "EquipmentInstance",
    "available_instances",
    "available_exercise_types",
    # Recovery
    "FatigueEvent",
    "MuscleRecoveryStatus",
    "RecoveryStatusLevel",
    # Volume
    "VolumeTarget",
    "WeeklyVolumeTracker",
    "WeeklyProgress",
    # History
    "WorkoutSession",
    "CompletedExercise",
    "WorkoutSet",
    # Generation
    "AdaptiveWorkoutRequest",
    "AdaptiveWorkoutResult",
    "SelectedExercise",
    "SubstituteCandidate",
    "SequenceRecommendation",
    "SequenceValidation",
    "WorkoutGenerationError",
    "SubstitutionError",
]

"""
Domain layer for the adaptive training engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    AdaptiveWorkoutRequest,
    AdaptiveWorkoutResult,
    EquipmentInstance,
    Exercise,
    ExerciseMuscleGroups,
    FatigueEvent,
    MuscleGroup,
    WeeklyVolumeTracker,
    WorkoutSession,
)

__all__ = [
    "AdaptiveWorkoutRequest",
    "AdaptiveWorkoutResult",
    "EquipmentInstance",
    "Exercise",
    "ExerciseMuscleGroups",
    "FatigueEvent",
    "MuscleGroup",
    "WeeklyVolumeTracker",
    "WorkoutSession",
]

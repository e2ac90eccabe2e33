"""
Immutable tunables for the adaptive training engine.

One AdaptiveEngineConfig is built per process (from Settings) and passed by
reference to every component. Reference tables are read-only mappings shared
with the domain layer; nothing here is mutated at runtime.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from backend.settings import Settings
from domain.models.exercise import (
    EQUIPMENT_PREFERENCES,
    PATTERN_PRIMARY_MUSCLE_GROUPS,
    ExerciseType,
    MovementPattern,
)
from domain.models.muscle_group import BASE_TIME_CONSTANTS, MuscleGroup


@dataclass(frozen=True)
class AdaptiveEngineConfig:
    """Scalars and reference tables used by recovery, volume and generation."""

    # Recovery model
    baseline_volume_load: float = 1000.0
    min_load_ratio: float = 0.5  # tau floor as a fraction of base tau
    recovery_window_hours: float = 168.0
    fresh_threshold: int = 80
    recovering_threshold: int = 50

    # Volume tracking
    on_track_threshold: float = 70.0

    # Generation
    minutes_per_exercise: int = 8
    min_session_exercises: int = 3
    max_alternatives: int = 3
    equipment_preference_weight: float = 10.0
    availability_bonus: float = 5.0
    default_equipment_preference: int = 1
    distinguish_duration_failures: bool = False

    base_time_constants: Mapping[MuscleGroup, float] = field(
        default_factory=lambda: BASE_TIME_CONSTANTS, repr=False
    )
    equipment_preferences: Mapping[ExerciseType, int] = field(
        default_factory=lambda: EQUIPMENT_PREFERENCES, repr=False
    )
    pattern_muscle_groups: Mapping[MovementPattern, Tuple[MuscleGroup, ...]] = field(
        default_factory=lambda: PATTERN_PRIMARY_MUSCLE_GROUPS, repr=False
    )


DEFAULT_ENGINE_CONFIG = AdaptiveEngineConfig()


def engine_config_from_settings(settings: Settings) -> AdaptiveEngineConfig:
    """Build the engine config from application settings."""
    return AdaptiveEngineConfig(
        baseline_volume_load=settings.baseline_volume_load,
        recovery_window_hours=settings.recovery_window_hours,
        on_track_threshold=settings.on_track_threshold,
        minutes_per_exercise=settings.minutes_per_exercise,
        min_session_exercises=settings.min_session_exercises,
        max_alternatives=settings.max_alternatives,
        distinguish_duration_failures=settings.distinguish_duration_failures,
    )


def resolve_config(config: Optional[AdaptiveEngineConfig]) -> AdaptiveEngineConfig:
    return config if config is not None else DEFAULT_ENGINE_CONFIG

"""
Application Use Cases.

This package contains application-level use cases that orchestrate the
adaptive engine and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import GenerateAdaptiveWorkoutUseCase

    use_case = GenerateAdaptiveWorkoutUseCase(
        catalog_repo=catalog_repo,
        equipment_repo=equipment_repo,
        history_repo=history_repo,
        service=AdaptiveWorkoutService(),
    )
    result = use_case.execute(target_duration_minutes=45)
"""

from application.use_cases.get_recovery_map import (
    GetRecoveryMapResult,
    GetRecoveryMapUseCase,
)
from application.use_cases.get_weekly_volume import (
    GetWeeklyVolumeResult,
    GetWeeklyVolumeUseCase,
)
from application.use_cases.generate_adaptive_workout import (
    GenerateAdaptiveWorkoutResult,
    GenerateAdaptiveWorkoutUseCase,
)
from application.use_cases.substitute_exercise import (
    SubstituteExerciseResult,
    SubstituteExerciseUseCase,
)

__all__ = [
    # GetRecoveryMap
    "GetRecoveryMapUseCase",
    "GetRecoveryMapResult",
    # GetWeeklyVolume
    "GetWeeklyVolumeUseCase",
    "GetWeeklyVolumeResult",
    # GenerateAdaptiveWorkout
    "GenerateAdaptiveWorkoutUseCase",
    "GenerateAdaptiveWorkoutResult",
    # SubstituteExercise
    "SubstituteExerciseUseCase",
    "SubstituteExerciseResult",
]

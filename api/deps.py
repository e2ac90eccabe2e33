"""
FastAPI Dependency Providers.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, engine config and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers assemble repositories and the core service

Usage in routers:
    from api.deps import get_generate_adaptive_workout_use_case

    @router.post("/adaptive-workouts/generate")
    def generate(
        use_case: GenerateAdaptiveWorkoutUseCase = Depends(get_generate_adaptive_workout_use_case),
    ):
        return use_case.execute(target_duration_minutes=45)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_catalog_repo] = lambda: FakeExerciseCatalogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    EquipmentRepository,
    ExerciseCatalogRepository,
    SubstitutionRepository,
    TrainingHistoryRepository,
)
from application.use_cases import (
    GenerateAdaptiveWorkoutUseCase,
    GetRecoveryMapUseCase,
    GetWeeklyVolumeUseCase,
    SubstituteExerciseUseCase,
)
from backend.core.adaptive_workout_service import AdaptiveWorkoutService
from backend.core.engine_config import AdaptiveEngineConfig, engine_config_from_settings

# Concrete implementations
from infrastructure import (
    SupabaseEquipmentRepository,
    SupabaseExerciseCatalogRepository,
    SupabaseSubstitutionRepository,
    SupabaseTrainingHistoryRepository,
)
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


def get_engine_config(settings: Settings = Depends(get_settings)) -> AdaptiveEngineConfig:
    """Engine tunables derived from settings."""
    return engine_config_from_settings(settings)


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_catalog_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseCatalogRepository:
    """
    Get ExerciseCatalogRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        ExerciseCatalogRepository: Read access to exercises and their splits
    """
    return SupabaseExerciseCatalogRepository(client)


def get_equipment_repo(
    client: Client = Depends(get_supabase_client_required),
) -> EquipmentRepository:
    """Get EquipmentRepository implementation."""
    return SupabaseEquipmentRepository(client)


def get_history_repo(
    client: Client = Depends(get_supabase_client_required),
) -> TrainingHistoryRepository:
    """Get TrainingHistoryRepository implementation."""
    return SupabaseTrainingHistoryRepository(client)


def get_substitution_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SubstitutionRepository:
    """Get SubstitutionRepository implementation."""
    return SupabaseSubstitutionRepository(client)


# =============================================================================
# Service & Use Case Providers
# =============================================================================


def get_adaptive_workout_service(
    config: AdaptiveEngineConfig = Depends(get_engine_config),
) -> AdaptiveWorkoutService:
    return AdaptiveWorkoutService(config=config)


def get_recovery_map_use_case(
    history_repo: TrainingHistoryRepository = Depends(get_history_repo),
    config: AdaptiveEngineConfig = Depends(get_engine_config),
) -> GetRecoveryMapUseCase:
    return GetRecoveryMapUseCase(history_repo=history_repo, config=config)


def get_weekly_volume_use_case(
    history_repo: TrainingHistoryRepository = Depends(get_history_repo),
    config: AdaptiveEngineConfig = Depends(get_engine_config),
) -> GetWeeklyVolumeUseCase:
    return GetWeeklyVolumeUseCase(history_repo=history_repo, config=config)


def get_generate_adaptive_workout_use_case(
    catalog_repo: ExerciseCatalogRepository = Depends(get_catalog_repo),
    equipment_repo: EquipmentRepository = Depends(get_equipment_repo),
    history_repo: TrainingHistoryRepository = Depends(get_history_repo),
    service: AdaptiveWorkoutService = Depends(get_adaptive_workout_service),
) -> GenerateAdaptiveWorkoutUseCase:
    return GenerateAdaptiveWorkoutUseCase(
        catalog_repo=catalog_repo,
        equipment_repo=equipment_repo,
        history_repo=history_repo,
        service=service,
    )


def get_substitute_exercise_use_case(
    catalog_repo: ExerciseCatalogRepository = Depends(get_catalog_repo),
    equipment_repo: EquipmentRepository = Depends(get_equipment_repo),
    substitution_repo: SubstitutionRepository = Depends(get_substitution_repo),
    service: AdaptiveWorkoutService = Depends(get_adaptive_workout_service),
) -> SubstituteExerciseUseCase:
    return SubstituteExerciseUseCase(
        catalog_repo=catalog_repo,
        equipment_repo=equipment_repo,
        substitution_repo=substitution_repo,
        service=service,
    )

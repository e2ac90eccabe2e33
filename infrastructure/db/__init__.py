"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseExerciseCatalogRepository,
        SupabaseEquipmentRepository,
        SupabaseTrainingHistoryRepository,
        SupabaseSubstitutionRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    catalog_repo = SupabaseExerciseCatalogRepository(client)
    equipment_repo = SupabaseEquipmentRepository(client)
    history_repo = SupabaseTrainingHistoryRepository(client, catalog_repo)
    substitution_repo = SupabaseSubstitutionRepository(client, catalog_repo)
"""

from infrastructure.db.exercise_catalog_repository import SupabaseExerciseCatalogRepository
from infrastructure.db.equipment_repository import SupabaseEquipmentRepository
from infrastructure.db.training_history_repository import SupabaseTrainingHistoryRepository
from infrastructure.db.substitution_repository import SupabaseSubstitutionRepository

__all__ = [
    "SupabaseExerciseCatalogRepository",
    "SupabaseEquipmentRepository",
    "SupabaseTrainingHistoryRepository",
    "SupabaseSubstitutionRepository",
]

"""
Infrastructure Layer.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseExerciseCatalogRepository,
    SupabaseEquipmentRepository,
    SupabaseTrainingHistoryRepository,
    SupabaseSubstitutionRepository,
)

__all__ = [
    "SupabaseExerciseCatalogRepository",
    "SupabaseEquipmentRepository",
    "SupabaseTrainingHistoryRepository",
    "SupabaseSubstitutionRepository",
]

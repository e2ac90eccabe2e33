"""
API package.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_engine_config,
    get_supabase_client,
    get_supabase_client_required,
    get_catalog_repo,
    get_equipment_repo,
    get_history_repo,
    get_substitution_repo,
    get_adaptive_workout_service,
    get_recovery_map_use_case,
    get_weekly_volume_use_case,
    get_generate_adaptive_workout_use_case,
    get_substitute_exercise_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    "get_engine_config",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_catalog_repo",
    "get_equipment_repo",
    "get_history_repo",
    "get_substitution_repo",
    # Services and use cases
    "get_adaptive_workout_service",
    "get_recovery_map_use_case",
    "get_weekly_volume_use_case",
    "get_generate_adaptive_workout_use_case",
    "get_substitute_exercise_use_case",
]

"""
Router package.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- recovery: Per-muscle-group recovery map
- volume: Weekly volume and progress
- adaptive_workouts: Workout generation and exercise substitution
"""

from api.routers.health import router as health_router
from api.routers.recovery import router as recovery_router
from api.routers.volume import router as volume_router
from api.routers.adaptive_workouts import router as adaptive_workouts_router

__all__ = [
    "health_router",
    "recovery_router",
    "volume_router",
    "adaptive_workouts_router",
]

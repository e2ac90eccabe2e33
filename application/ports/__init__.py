"""
Repository Interfaces (Ports).

This package defines the interfaces the adaptive engine needs from the
outside world. Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseCatalogRepository

    class GenerateAdaptiveWorkoutUseCase:
        def __init__(self, catalog_repo: ExerciseCatalogRepository):
            self._catalog_repo = catalog_repo
"""

from application.ports.exercise_catalog_repository import ExerciseCatalogRepository
from application.ports.equipment_repository import EquipmentRepository
from application.ports.training_history_repository import TrainingHistoryRepository
from application.ports.substitution_repository import SubstitutionRepository

__all__ = [
    "ExerciseCatalogRepository",
    "EquipmentRepository",
    "TrainingHistoryRepository",
    "SubstitutionRepository",
]

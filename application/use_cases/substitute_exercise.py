"""
SubstituteExercise Use Case.

Replaces an exercise whose equipment is taken with the best substitute
that the available equipment can serve.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from application.ports import (
    EquipmentRepository,
    ExerciseCatalogRepository,
    SubstitutionRepository,
)
from backend.core.adaptive_workout_service import AdaptiveWorkoutService
from domain.models import Exercise, SubstituteCandidate, SubstitutionError

logger = logging.getLogger(__name__)


@dataclass
class SubstituteExerciseResult:
    """Result of the SubstituteExercise use case execution."""

    success: bool
    original: Optional[Exercise] = None
    substitute: Optional[Exercise] = None
    candidate: Optional[SubstituteCandidate] = None
    error: Optional[str] = None


class SubstituteExerciseUseCase:
    """
    Use case for exercise substitution.

    Workflow:
    1. Confirm the exercise exists in the catalog
    2. Load similarity-filtered substitute candidates
    3. Keep candidates the available equipment can serve, pick the best
    """

    def __init__(
        self,
        catalog_repo: ExerciseCatalogRepository,
        equipment_repo: EquipmentRepository,
        substitution_repo: SubstitutionRepository,
        service: AdaptiveWorkoutService,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._equipment_repo = equipment_repo
        self._substitution_repo = substitution_repo
        self._service = service

    def execute(
        self,
        exercise_id: str,
        equipment_ids: Optional[Sequence[str]] = None,
    ) -> SubstituteExerciseResult:
        try:
            original = self._catalog_repo.get_by_id(exercise_id)
            if original is None:
                logger.warning(f"Exercise {exercise_id} not found for substitution")
                return SubstituteExerciseResult(
                    success=False, error=SubstitutionError.EXERCISE_NOT_FOUND.value
                )

            substitutes = self._substitution_repo.find_substitutes(exercise_id)
            equipment = self._equipment_repo.get_available_equipment(equipment_ids)
        except Exception:
            logger.exception(f"Failed to load substitutes for {exercise_id}")
            return SubstituteExerciseResult(success=False, error="repository_error")

        replaced = self._service.replace_exercise(exercise_id, substitutes, equipment)
        if not replaced.success:
            logger.warning(f"No substitute for {exercise_id}: {replaced.error.value}")
            return SubstituteExerciseResult(
                success=False,
                original=original.exercise,
                error=replaced.error.value,
            )

        logger.info(f"Substituting {exercise_id} with {replaced.exercise.id}")
        return SubstituteExerciseResult(
            success=True,
            original=original.exercise,
            substitute=replaced.exercise,
            candidate=replaced.candidate,
        )

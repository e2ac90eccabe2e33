"""
GenerateAdaptiveWorkout Use Case.

Fetches the catalog, the available equipment and (optionally) this week's
volume debt, then runs the adaptive workout generator.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence

from application.ports import (
    EquipmentRepository,
    ExerciseCatalogRepository,
    TrainingHistoryRepository,
)
from application.use_cases.get_weekly_volume import GetWeeklyVolumeUseCase
from backend.core.adaptive_workout_service import AdaptiveWorkoutService
from domain.models import AdaptiveWorkoutRequest, AdaptiveWorkoutResult, MuscleGroup

logger = logging.getLogger(__name__)


@dataclass
class GenerateAdaptiveWorkoutResult:
    """Result of the GenerateAdaptiveWorkout use case execution."""

    success: bool
    workout: Optional[AdaptiveWorkoutResult] = None
    volume_needs: Optional[Dict[MuscleGroup, float]] = None
    error: Optional[str] = None


class GenerateAdaptiveWorkoutUseCase:
    """
    Use case for generating an adaptive workout.

    Orchestrates the following workflow:
    1. Load available equipment (optionally restricted to given ids)
    2. Load the exercise catalog
    3. If requested, derive volume needs from this week's history
    4. Delegate selection to AdaptiveWorkoutService

    Usage:
        >>> use_case = GenerateAdaptiveWorkoutUseCase(
        ...     catalog_repo=catalog_repo,
        ...     equipment_repo=equipment_repo,
        ...     history_repo=history_repo,
        ...     service=AdaptiveWorkoutService(),
        ... )
        >>> result = use_case.execute(target_duration_minutes=45)
    """

    def __init__(
        self,
        catalog_repo: ExerciseCatalogRepository,
        equipment_repo: EquipmentRepository,
        history_repo: TrainingHistoryRepository,
        service: AdaptiveWorkoutService,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._equipment_repo = equipment_repo
        self._history_repo = history_repo
        self._service = service

    def execute(
        self,
        target_duration_minutes: int,
        equipment_ids: Optional[Sequence[str]] = None,
        *,
        use_volume_needs: bool = True,
        now: Optional[datetime] = None,
    ) -> GenerateAdaptiveWorkoutResult:
        """
        Generate a workout.

        Args:
            target_duration_minutes: Session length budget
            equipment_ids: Restrict to these equipment instances, or None for all
            use_volume_needs: Prioritize muscle groups with weekly set debt
            now: Reference time for the volume week (current time if omitted)

        Returns:
            GenerateAdaptiveWorkoutResult with the workout or an error string
        """
        try:
            equipment = self._equipment_repo.get_available_equipment(equipment_ids)
            catalog = self._catalog_repo.list_all()
        except Exception:
            logger.exception("Failed to load catalog or equipment")
            return GenerateAdaptiveWorkoutResult(success=False, error="repository_error")

        volume_needs = None
        if use_volume_needs:
            volume_result = GetWeeklyVolumeUseCase(
                self._history_repo, config=self._service.config
            ).execute(now)
            if not volume_result.success:
                return GenerateAdaptiveWorkoutResult(success=False, error=volume_result.error)
            volume_needs = volume_result.volume_needs

        logger.info(
            f"Generating {target_duration_minutes}min workout from {len(catalog)} exercises "
            f"and {len(equipment)} available equipment"
        )
        request = AdaptiveWorkoutRequest(
            target_duration_minutes=target_duration_minutes,
            available_equipment=equipment,
            volume_needs=volume_needs,
        )
        generated = self._service.generate_workout(request, catalog)
        if not generated.success:
            logger.warning(f"Workout generation failed: {generated.error.value}")
            return GenerateAdaptiveWorkoutResult(
                success=False,
                volume_needs=volume_needs,
                error=generated.error.value,
            )

        return GenerateAdaptiveWorkoutResult(
            success=True,
            workout=generated.workout,
            volume_needs=volume_needs,
        )

"""
Adaptive Workout Service.

Generates a strength session from the exercise catalog under equipment,
time and movement-variety constraints, and picks substitutes for exercises
whose equipment is taken.

Pipeline for generate_workout():
1. Keep catalog entries whose type is served by available equipment
2. Budget: floor(target_duration / minutes_per_exercise) exercises
3. Loop: ask the sequencer for a pattern, score same-pattern candidates
   (fall back to any pattern), pick the best, never repeat an exercise
4. Fail if fewer than the minimum number of exercises were selected
5. Attach same-pattern alternatives and logistics (floor switches, duration)

Scoring (higher is better, ties -> first in catalog order):
    score = sum((n_priority - priority_index(mg)) * split)
          + equipment_preference(type) * 10
          + 5 if any available instance serves the type
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from backend.core.engine_config import AdaptiveEngineConfig, resolve_config
from backend.core.movement_sequencer import MovementPatternSequencer
from backend.core.volume_tracker import prioritize_volume_needs
from domain.models.adaptive import (
    AdaptiveWorkoutRequest,
    AdaptiveWorkoutResult,
    SelectedExercise,
    SubstituteCandidate,
    SubstitutionError,
    WorkoutGenerationError,
)
from domain.models.equipment import EquipmentInstance, available_exercise_types
from domain.models.exercise import Exercise, ExerciseMuscleGroups, ExerciseType, MovementPattern
from domain.models.muscle_group import MuscleGroup

logger = logging.getLogger(__name__)


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass
class WorkoutGenerationResult:
    """Outcome of generate_workout(): a workout or a failure tag."""

    success: bool
    workout: Optional[AdaptiveWorkoutResult] = None
    error: Optional[WorkoutGenerationError] = None


@dataclass
class SubstitutionResult:
    """Outcome of replace_exercise(): the chosen substitute or a failure tag."""

    success: bool
    exercise: Optional[Exercise] = None
    candidate: Optional[SubstituteCandidate] = None
    error: Optional[SubstitutionError] = None


# =============================================================================
# Helpers
# =============================================================================


def filter_by_available_equipment(
    exercises: Sequence[ExerciseMuscleGroups],
    available_equipment: Sequence[EquipmentInstance],
) -> List[ExerciseMuscleGroups]:
    """Catalog entries whose type matches an available instance, catalog order kept."""
    types = available_exercise_types(available_equipment)
    return [entry for entry in exercises if entry.exercise.type in types]


def find_equipment_for(
    exercise_type: ExerciseType,
    available_equipment: Sequence[EquipmentInstance],
) -> Optional[EquipmentInstance]:
    """First available instance serving ``exercise_type``."""
    for equipment in available_equipment:
        if equipment.is_available and equipment.exercise_type == exercise_type:
            return equipment
    return None


def rank_substitutes(candidates: Sequence[SubstituteCandidate]) -> List[SubstituteCandidate]:
    """
    Deterministic substitute ranking.

    Order: similarity score desc, muscle overlap desc, |difficulty delta| asc,
    then provider order.
    """
    return sorted(
        candidates,
        key=lambda c: (-c.similarity_score, -c.muscle_overlap_percentage, abs(c.difficulty_delta)),
    )


# =============================================================================
# Adaptive Workout Service
# =============================================================================


class AdaptiveWorkoutService:
    """
    Workout generation and exercise substitution.

    Pure and synchronous: inputs are immutable and no state is kept between
    calls, so one instance can be shared across requests.
    """

    def __init__(
        self,
        config: Optional[AdaptiveEngineConfig] = None,
        sequencer: Optional[MovementPatternSequencer] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Engine tunables (process defaults if omitted)
            sequencer: Pattern sequencer (canonical order if omitted)
        """
        self._config = resolve_config(config)
        self._sequencer = sequencer or MovementPatternSequencer()

    @property
    def config(self) -> AdaptiveEngineConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate_workout(
        self,
        request: AdaptiveWorkoutRequest,
        catalog: Sequence[ExerciseMuscleGroups],
    ) -> WorkoutGenerationResult:
        """
        Generate a session for the request from the catalog.

        Args:
            request: Duration, available equipment and optional volume needs
            catalog: All catalog exercises with their splits

        Returns:
            WorkoutGenerationResult with the workout, or an error tag:
            no_available_equipment, insufficient_exercises, or
            duration_constraint_failed (only when enabled in config)
        """
        available = filter_by_available_equipment(catalog, request.available_equipment)
        if not available:
            logger.info("No catalog exercise matches the available equipment")
            return WorkoutGenerationResult(
                success=False, error=WorkoutGenerationError.NO_AVAILABLE_EQUIPMENT
            )

        max_exercises = self.max_exercises_for(request.target_duration_minutes)
        if (
            self._config.distinguish_duration_failures
            and max_exercises < self._config.min_session_exercises
        ):
            logger.info(
                f"Duration {request.target_duration_minutes}min fits only "
                f"{max_exercises} exercises"
            )
            return WorkoutGenerationResult(
                success=False, error=WorkoutGenerationError.DURATION_CONSTRAINT_FAILED
            )

        selected = self.select_optimal_exercises(available, request, max_exercises)
        if len(selected) < self._config.min_session_exercises:
            logger.info(
                f"Only {len(selected)} exercises selected "
                f"(minimum {self._config.min_session_exercises})"
            )
            return WorkoutGenerationResult(
                success=False, error=WorkoutGenerationError.INSUFFICIENT_EXERCISES
            )

        session = []
        for index, entry in enumerate(selected):
            equipment = find_equipment_for(entry.exercise.type, request.available_equipment)
            session.append(
                SelectedExercise(
                    exercise=entry.exercise,
                    order_index=index,
                    equipment_id=equipment.id if equipment else None,
                    gym_floor_id=equipment.gym_floor_id if equipment else None,
                )
            )

        workout = AdaptiveWorkoutResult(
            session=session,
            alternatives=self.generate_alternatives(selected, available),
            floor_switches=self.calculate_floor_switches(selected, request.available_equipment),
            estimated_duration_minutes=self.estimate_duration(selected),
        )
        logger.debug(
            f"Generated {len(session)} exercises: "
            f"{[p.value for p in workout.movement_patterns]}"
        )
        return WorkoutGenerationResult(success=True, workout=workout)

    def max_exercises_for(self, target_duration_minutes: int) -> int:
        return max(0, target_duration_minutes // self._config.minutes_per_exercise)

    def select_optimal_exercises(
        self,
        available: Sequence[ExerciseMuscleGroups],
        request: AdaptiveWorkoutRequest,
        max_exercises: Optional[int] = None,
    ) -> List[ExerciseMuscleGroups]:
        """
        Greedy selection loop.

        Each round asks the sequencer for a pattern and picks the best unused
        exercise of that pattern; if none exists, the best unused exercise of
        any pattern. Stops early once every exercise is used.
        """
        if max_exercises is None:
            max_exercises = self.max_exercises_for(request.target_duration_minutes)

        priority = prioritize_volume_needs(request.volume_needs or {})
        selected: List[ExerciseMuscleGroups] = []
        selected_ids = set()
        used_patterns: List[MovementPattern] = []

        while len(selected) < max_exercises:
            recommendation = self._sequencer.next_pattern(used_patterns)
            remaining = [e for e in available if e.exercise.id not in selected_ids]
            if not remaining:
                break

            candidates = [
                e for e in remaining
                if e.exercise.movement_pattern == recommendation.next_pattern
            ]
            if not candidates:
                candidates = remaining

            best = self.select_best_exercise(candidates, priority, request.available_equipment)
            selected.append(best)
            selected_ids.add(best.exercise.id)
            used_patterns.append(best.exercise.movement_pattern)

        return selected

    def select_best_exercise(
        self,
        candidates: Sequence[ExerciseMuscleGroups],
        priority_muscle_groups: Sequence[MuscleGroup],
        available_equipment: Sequence[EquipmentInstance],
    ) -> ExerciseMuscleGroups:
        """Highest-scoring candidate; the first one wins ties."""
        priority_index = {mg: i for i, mg in enumerate(priority_muscle_groups)}
        best = candidates[0]
        best_score = self._score(best, priority_index, available_equipment)
        for candidate in candidates[1:]:
            score = self._score(candidate, priority_index, available_equipment)
            if score > best_score:
                best, best_score = candidate, score
        return best

    def score_exercise(
        self,
        entry: ExerciseMuscleGroups,
        priority_muscle_groups: Sequence[MuscleGroup],
        available_equipment: Sequence[EquipmentInstance],
    ) -> float:
        """Score one catalog entry (see module docstring)."""
        priority_index = {mg: i for i, mg in enumerate(priority_muscle_groups)}
        return self._score(entry, priority_index, available_equipment)

    def _score(
        self,
        entry: ExerciseMuscleGroups,
        priority_index: Mapping[MuscleGroup, int],
        available_equipment: Sequence[EquipmentInstance],
    ) -> float:
        score = 0.0
        n_priority = len(priority_index)
        for split in entry.muscle_group_splits:
            index = priority_index.get(split.muscle_group)
            if index is not None:
                score += (n_priority - index) * split.split

        preference = self._config.equipment_preferences.get(
            entry.exercise.type, self._config.default_equipment_preference
        )
        score += preference * self._config.equipment_preference_weight

        if find_equipment_for(entry.exercise.type, available_equipment) is not None:
            score += self._config.availability_bonus

        return score

    def generate_alternatives(
        self,
        selected: Sequence[ExerciseMuscleGroups],
        available: Sequence[ExerciseMuscleGroups],
    ) -> Dict[str, List[Exercise]]:
        """Up to max_alternatives same-pattern exercises per selection, catalog order."""
        alternatives: Dict[str, List[Exercise]] = {}
        for chosen in selected:
            same_pattern = [
                e.exercise
                for e in available
                if e.exercise.movement_pattern == chosen.exercise.movement_pattern
                and e.exercise.id != chosen.exercise.id
            ]
            alternatives[chosen.exercise.id] = same_pattern[: self._config.max_alternatives]
        return alternatives

    def calculate_floor_switches(
        self,
        selected: Sequence[ExerciseMuscleGroups],
        available_equipment: Sequence[EquipmentInstance],
    ) -> int:
        """
        Count floor changes between consecutive exercises.

        Each exercise uses the first available instance of its type. The first
        exercise never counts; exercises without a matching instance are skipped.
        """
        switches = 0
        current_floor: Optional[str] = None
        for entry in selected:
            equipment = find_equipment_for(entry.exercise.type, available_equipment)
            if equipment is None:
                continue
            if current_floor is not None and current_floor != equipment.gym_floor_id:
                switches += 1
            current_floor = equipment.gym_floor_id
        return switches

    def estimate_duration(self, selected: Sequence[ExerciseMuscleGroups]) -> int:
        """Minutes: exercises x minutes_per_exercise."""
        return len(selected) * self._config.minutes_per_exercise

    # -------------------------------------------------------------------------
    # Substitution
    # -------------------------------------------------------------------------

    def replace_exercise(
        self,
        exercise_id: str,
        substitutes: Sequence[SubstituteCandidate],
        available_equipment: Sequence[EquipmentInstance],
    ) -> SubstitutionResult:
        """
        Pick the best substitute usable with the available equipment.

        Args:
            exercise_id: Exercise being replaced
            substitutes: Similarity-ranked candidates from the substitute provider
            available_equipment: Equipment the user can use right now

        Returns:
            SubstitutionResult with the chosen exercise, or an error tag:
            no_suitable_substitutes (empty list) or equipment_unavailable
        """
        candidates = [c for c in substitutes if c.exercise.exercise.id != exercise_id]
        if not candidates:
            logger.info(f"No substitutes known for exercise {exercise_id}")
            return SubstitutionResult(
                success=False, error=SubstitutionError.NO_SUITABLE_SUBSTITUTES
            )

        types = available_exercise_types(available_equipment)
        usable = [c for c in candidates if c.exercise.exercise.type in types]
        if not usable:
            logger.info(
                f"{len(candidates)} substitutes for {exercise_id}, none with available equipment"
            )
            return SubstitutionResult(
                success=False, error=SubstitutionError.EQUIPMENT_UNAVAILABLE
            )

        best = rank_substitutes(usable)[0]
        return SubstitutionResult(success=True, exercise=best.exercise.exercise, candidate=best)

"""
Adaptive workouts router.

Workout generation under equipment and time constraints, and exercise
substitution when equipment is taken.
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import (
    get_generate_adaptive_workout_use_case,
    get_substitute_exercise_use_case,
)
from application.use_cases import (
    GenerateAdaptiveWorkoutUseCase,
    SubstituteExerciseUseCase,
)
from domain.models import Exercise

router = APIRouter(
    prefix="/adaptive-workouts",
    tags=["Adaptive Workouts"],
)

ERROR_STATUS_CODES = {
    "no_available_equipment": 422,
    "insufficient_exercises": 422,
    "duration_constraint_failed": 422,
    "exercise_not_found": 404,
    "no_suitable_substitutes": 409,
    "equipment_unavailable": 409,
    "repository_error": 503,
}


def _raise_for_error(error: Optional[str]) -> None:
    raise HTTPException(status_code=ERROR_STATUS_CODES.get(error, 500), detail=error)


# =============================================================================
# Request/Response Models
# =============================================================================


class GenerateWorkoutRequest(BaseModel):
    """Request body for workout generation."""
    target_duration_minutes: int = Field(..., ge=1, le=600)
    equipment_ids: Optional[List[str]] = Field(
        default=None,
        description="Restrict to these equipment instances (all available if omitted)",
    )
    use_volume_needs: bool = Field(
        default=True,
        description="Prioritize muscle groups behind on this week's volume",
    )


class ExerciseResponse(BaseModel):
    """A catalog exercise."""
    id: str
    name: str
    type: str
    movement_pattern: str

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseResponse":
        return cls(
            id=exercise.id,
            name=exercise.name,
            type=exercise.type.value,
            movement_pattern=exercise.movement_pattern.value,
        )


class SessionExerciseResponse(BaseModel):
    """One exercise slot in a generated session."""
    order_index: int
    exercise: ExerciseResponse
    equipment_id: Optional[str] = None
    gym_floor_id: Optional[str] = None
    alternatives: List[ExerciseResponse] = Field(default_factory=list)


class GeneratedWorkoutResponse(BaseModel):
    """A generated session with logistics."""
    exercises: List[SessionExerciseResponse] = Field(default_factory=list)
    floor_switches: int
    estimated_duration_minutes: int
    volume_needs: Optional[Dict[str, float]] = None


class SubstituteRequest(BaseModel):
    """Request body for exercise substitution."""
    exercise_id: str = Field(..., min_length=1)
    equipment_ids: Optional[List[str]] = None


class SubstituteResponse(BaseModel):
    """The chosen substitute."""
    original: ExerciseResponse
    substitute: ExerciseResponse
    similarity_score: float
    muscle_overlap_percentage: float
    difficulty_delta: float


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/generate", response_model=GeneratedWorkoutResponse)
def generate_workout(
    request: GenerateWorkoutRequest,
    use_case: GenerateAdaptiveWorkoutUseCase = Depends(get_generate_adaptive_workout_use_case),
) -> GeneratedWorkoutResponse:
    """
    Generate a workout for the available equipment and time.

    Returns 422 when no exercise fits the equipment or fewer than three
    exercises can be selected.
    """
    result = use_case.execute(
        target_duration_minutes=request.target_duration_minutes,
        equipment_ids=request.equipment_ids,
        use_volume_needs=request.use_volume_needs,
    )
    if not result.success:
        _raise_for_error(result.error)

    workout = result.workout
    return GeneratedWorkoutResponse(
        exercises=[
            SessionExerciseResponse(
                order_index=slot.order_index,
                exercise=ExerciseResponse.from_exercise(slot.exercise),
                equipment_id=slot.equipment_id,
                gym_floor_id=slot.gym_floor_id,
                alternatives=[
                    ExerciseResponse.from_exercise(alt)
                    for alt in workout.alternatives.get(slot.exercise.id, [])
                ],
            )
            for slot in workout.session
        ],
        floor_switches=workout.floor_switches,
        estimated_duration_minutes=workout.estimated_duration_minutes,
        volume_needs=(
            {mg.value: sets for mg, sets in result.volume_needs.items()}
            if result.volume_needs is not None
            else None
        ),
    )


@router.post("/substitute", response_model=SubstituteResponse)
def substitute_exercise(
    request: SubstituteRequest,
    use_case: SubstituteExerciseUseCase = Depends(get_substitute_exercise_use_case),
) -> SubstituteResponse:
    """
    Replace an exercise with the closest substitute the available equipment allows.

    Returns 404 for an unknown exercise and 409 when no usable substitute exists.
    """
    result = use_case.execute(
        exercise_id=request.exercise_id,
        equipment_ids=request.equipment_ids,
    )
    if not result.success:
        _raise_for_error(result.error)

    return SubstituteResponse(
        original=ExerciseResponse.from_exercise(result.original),
        substitute=ExerciseResponse.from_exercise(result.substitute),
        similarity_score=result.candidate.similarity_score,
        muscle_overlap_percentage=result.candidate.muscle_overlap_percentage,
        difficulty_delta=result.candidate.difficulty_delta,
    )

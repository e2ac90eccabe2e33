"""
Adaptive workout generation value objects.

Input contract (AdaptiveWorkoutRequest), output (AdaptiveWorkoutResult),
substitution candidates, sequencing recommendations and the closed sets of
failure tags returned by generation and substitution.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models.equipment import EquipmentInstance
from domain.models.exercise import Exercise, ExerciseMuscleGroups, MovementPattern
from domain.models.muscle_group import MuscleGroup


class WorkoutGenerationError(str, Enum):
    """Why a workout could not be generated."""

    NO_AVAILABLE_EQUIPMENT = "no_available_equipment"
    INSUFFICIENT_EXERCISES = "insufficient_exercises"
    DURATION_CONSTRAINT_FAILED = "duration_constraint_failed"


class SubstitutionError(str, Enum):
    """Why an exercise could not be substituted."""

    EXERCISE_NOT_FOUND = "exercise_not_found"
    NO_SUITABLE_SUBSTITUTES = "no_suitable_substitutes"
    EQUIPMENT_UNAVAILABLE = "equipment_unavailable"


class AdaptiveWorkoutRequest(BaseModel):
    """What the caller wants: a duration, the equipment at hand, optional volume debt."""

    target_duration_minutes: int = Field(..., ge=0)
    available_equipment: List[EquipmentInstance] = Field(default_factory=list)
    volume_needs: Optional[Dict[MuscleGroup, float]] = Field(
        default=None,
        description="Remaining weekly sets per muscle group; higher debt gets priority",
    )

    model_config = {"frozen": True}


class SelectedExercise(BaseModel):
    """One slot of a generated session."""

    exercise: Exercise
    order_index: int = Field(..., ge=0)
    equipment_id: Optional[str] = None
    gym_floor_id: Optional[str] = None

    model_config = {"frozen": True}


class AdaptiveWorkoutResult(BaseModel):
    """A generated session with substitutes and logistics."""

    session: List[SelectedExercise]
    alternatives: Dict[str, List[Exercise]] = Field(
        default_factory=dict,
        description="Exercise id -> up to N same-pattern substitutes, catalog order",
    )
    floor_switches: int = Field(default=0, ge=0)
    estimated_duration_minutes: int = Field(default=0, ge=0)

    @property
    def exercise_ids(self) -> List[str]:
        return [slot.exercise.id for slot in self.session]

    @property
    def movement_patterns(self) -> List[MovementPattern]:
        return [slot.exercise.movement_pattern for slot in self.session]

    model_config = {"frozen": True}


class SubstituteCandidate(BaseModel):
    """A pre-ranked substitute for some primary exercise."""

    exercise: ExerciseMuscleGroups
    similarity_score: float = Field(default=0.0, ge=0, le=1)
    muscle_overlap_percentage: float = Field(default=0.0, ge=0, le=100)
    difficulty_delta: float = 0.0

    model_config = {"frozen": True}


class SequenceRecommendation(BaseModel):
    """The movement pattern to aim for next, with an explanation."""

    next_pattern: MovementPattern
    confidence: float = Field(..., ge=0, le=1)
    reasoning: str = ""

    model_config = {"frozen": True}


class SequenceValidation(BaseModel):
    """How closely a pattern sequence follows the canonical rotation."""

    is_optimal: bool
    score: float = Field(..., ge=0, le=1)

    model_config = {"frozen": True}

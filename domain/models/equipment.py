"""
Gym equipment value object.

Equipment instances are read-only input to workout generation: each one
serves a single exercise type on a given gym floor.
"""

from typing import Iterable, List, Set

from pydantic import BaseModel, Field

from domain.models.exercise import ExerciseType


class EquipmentInstance(BaseModel):
    """A physical piece of equipment on a gym floor."""

    id: str = Field(..., min_length=1)
    exercise_type: ExerciseType
    gym_floor_id: str
    name: str = ""
    capacity: int = Field(default=1, ge=0)
    is_available: bool = True

    model_config = {"frozen": True}


def available_instances(equipment: Iterable[EquipmentInstance]) -> List[EquipmentInstance]:
    """Equipment currently available, in input order."""
    return [eq for eq in equipment if eq.is_available]


def available_exercise_types(equipment: Iterable[EquipmentInstance]) -> Set[ExerciseType]:
    """Exercise types served by at least one available instance."""
    return {eq.exercise_type for eq in equipment if eq.is_available}

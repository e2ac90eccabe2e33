"""
Muscle group reference data.

The 13 muscle groups used for recovery and volume accounting, together with
their body-region category and base recovery time constant (tau, in hours).
Larger tau means slower recovery.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MuscleGroup(str, Enum):
    """Anatomical groupings tracked for recovery and weekly volume."""

    ABS = "abs"
    ARMSTRINGS = "armstrings"  # hamstrings (legacy catalog spelling)
    BICEPS = "biceps"
    CALVES = "calves"
    DELTS = "delts"
    FOREARM = "forearm"
    GLUTES = "glutes"
    LATS = "lats"
    LOWER_BACK = "lower_back"
    PECS = "pecs"
    QUADS = "quads"
    TRAPEZES = "trapezes"
    TRICEPS = "triceps"


class MuscleGroupCategory(str, Enum):
    """Body region a muscle group belongs to."""

    CORE = "core"
    LEGS = "legs"
    ARMS = "arms"
    BACK = "back"


MUSCLE_GROUP_CATEGORIES: Mapping[MuscleGroup, MuscleGroupCategory] = MappingProxyType(
    {
        MuscleGroup.ABS: MuscleGroupCategory.CORE,
        MuscleGroup.ARMSTRINGS: MuscleGroupCategory.LEGS,
        MuscleGroup.BICEPS: MuscleGroupCategory.ARMS,
        MuscleGroup.CALVES: MuscleGroupCategory.LEGS,
        MuscleGroup.DELTS: MuscleGroupCategory.ARMS,
        MuscleGroup.FOREARM: MuscleGroupCategory.ARMS,
        MuscleGroup.GLUTES: MuscleGroupCategory.LEGS,
        MuscleGroup.LATS: MuscleGroupCategory.BACK,
        MuscleGroup.LOWER_BACK: MuscleGroupCategory.BACK,
        MuscleGroup.PECS: MuscleGroupCategory.CORE,
        MuscleGroup.QUADS: MuscleGroupCategory.LEGS,
        MuscleGroup.TRAPEZES: MuscleGroupCategory.BACK,
        MuscleGroup.TRICEPS: MuscleGroupCategory.ARMS,
    }
)

# Base recovery time constants (tau) in hours per muscle group
BASE_TIME_CONSTANTS: Mapping[MuscleGroup, float] = MappingProxyType(
    {
        MuscleGroup.PECS: 36.0,
        MuscleGroup.ABS: 18.0,
        MuscleGroup.LATS: 28.0,
        MuscleGroup.TRAPEZES: 28.0,
        MuscleGroup.LOWER_BACK: 28.0,
        MuscleGroup.QUADS: 26.0,
        MuscleGroup.ARMSTRINGS: 28.0,
        MuscleGroup.GLUTES: 28.0,
        MuscleGroup.CALVES: 16.0,
        MuscleGroup.DELTS: 20.0,
        MuscleGroup.BICEPS: 20.0,
        MuscleGroup.TRICEPS: 20.0,
        MuscleGroup.FOREARM: 16.0,
    }
)


def parse_muscle_group(value: str) -> MuscleGroup:
    """
    Parse a raw catalog string into a MuscleGroup.

    Args:
        value: Raw muscle group name (case-insensitive)

    Returns:
        The matching MuscleGroup

    Raises:
        ValueError: If the value is not a known muscle group
    """
    try:
        return MuscleGroup(value.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in MuscleGroup)
        raise ValueError(f"Unknown muscle group '{value}'. Valid values: {valid}")

"""
Exercise Catalog Repository Interface (Port).

Read access to the exercise catalog: every exercise together with its
muscle-group splits. Used by workout generation and substitution.
"""
from typing import List, Optional, Protocol

from domain.models.exercise import ExerciseMuscleGroups


class ExerciseCatalogRepository(Protocol):
    """
    Abstract interface for reading the exercise catalog.

    Implementations must return entries in a stable order; generation breaks
    score ties by catalog position.
    """

    def list_all(self) -> List[ExerciseMuscleGroups]:
        """
        Get every catalog exercise with its muscle-group splits.

        Returns:
            List of ExerciseMuscleGroups in catalog order
        """
        ...

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseMuscleGroups]:
        """
        Get one catalog exercise.

        Args:
            exercise_id: Exercise ID

        Returns:
            ExerciseMuscleGroups or None if not found
        """
        ...

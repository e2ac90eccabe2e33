"""
Fake ExerciseCatalogRepository for testing.

In-memory catalog preserving insertion order (catalog order).
"""
from typing import List, Optional, Sequence

from domain.models import ExerciseMuscleGroups


class FakeExerciseCatalogRepository:
    """In-memory fake implementation of ExerciseCatalogRepository."""

    def __init__(self, entries: Optional[Sequence[ExerciseMuscleGroups]] = None):
        self._entries: List[ExerciseMuscleGroups] = list(entries or [])

    def seed(self, entries: Sequence[ExerciseMuscleGroups]) -> None:
        """Append entries to the catalog."""
        self._entries.extend(entries)

    def reset(self) -> None:
        self._entries = []

    def list_all(self) -> List[ExerciseMuscleGroups]:
        return list(self._entries)

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseMuscleGroups]:
        for entry in self._entries:
            if entry.exercise.id == exercise_id:
                return entry
        return None

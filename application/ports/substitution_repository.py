"""
Substitution Repository Interface (Port).

Provides substitute candidates for an exercise, already filtered to
sufficiently similar ones.
"""
from typing import List, Protocol

from domain.models.adaptive import SubstituteCandidate


class SubstitutionRepository(Protocol):
    """Abstract interface for exercise substitute lookup."""

    def find_substitutes(self, exercise_id: str) -> List[SubstituteCandidate]:
        """
        Get substitute candidates for an exercise.

        Args:
            exercise_id: Exercise being replaced

        Returns:
            Candidates ordered by similarity (best first); empty if none
        """
        ...

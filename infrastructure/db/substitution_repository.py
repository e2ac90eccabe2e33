"""
Supabase implementation of SubstitutionRepository.

Reads precomputed rows from exercise_substitutions and keeps only close
matches: similarity score >= 0.7 and muscle overlap >= 80%.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError
from supabase import Client

from domain.models import SubstituteCandidate
from infrastructure.db.exercise_catalog_repository import SupabaseExerciseCatalogRepository

logger = logging.getLogger(__name__)

MIN_SIMILARITY_SCORE = 0.7
MIN_MUSCLE_OVERLAP = 80


class SupabaseSubstitutionRepository:
    """Supabase implementation of SubstitutionRepository protocol."""

    def __init__(self, client: Client, catalog_repo: Optional[SupabaseExerciseCatalogRepository] = None):
        self._client = client
        self._catalog_repo = catalog_repo or SupabaseExerciseCatalogRepository(client)

    def find_substitutes(self, exercise_id: str) -> List[SubstituteCandidate]:
        try:
            result = self._client.table("exercise_substitutions") \
                .select(
                    "substitute_exercise_id, similarity_score, "
                    "muscle_overlap_percentage, difficulty_delta"
                ) \
                .eq("primary_exercise_id", exercise_id) \
                .gte("similarity_score", MIN_SIMILARITY_SCORE) \
                .gte("muscle_overlap_percentage", MIN_MUSCLE_OVERLAP) \
                .order("similarity_score", desc=True) \
                .execute()
        except Exception:
            logger.exception(f"Error fetching substitutes for {exercise_id}")
            raise

        rows = result.data or []
        if not rows:
            return []

        catalog = {
            e.exercise.id: e
            for e in self._catalog_repo.get_many([str(r["substitute_exercise_id"]) for r in rows])
        }

        candidates = []
        for row in rows:
            entry = catalog.get(str(row["substitute_exercise_id"]))
            if entry is None:
                logger.warning(f"Substitute {row['substitute_exercise_id']} missing from catalog")
                continue
            try:
                candidates.append(
                    SubstituteCandidate(
                        exercise=entry,
                        similarity_score=row.get("similarity_score") or 0,
                        muscle_overlap_percentage=row.get("muscle_overlap_percentage") or 0,
                        difficulty_delta=row.get("difficulty_delta") or 0,
                    )
                )
            except ValidationError as e:
                logger.warning(f"Skipping invalid substitute row for {exercise_id}: {e}")
        return candidates

"""
Supabase implementation of ExerciseCatalogRepository.

Reads the exercises table and joins each exercise with its rows in
exercise_muscle_groups. Exercises whose splits do not total 100 are
skipped so that invalid entries never reach workout generation.
"""
import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError
from supabase import Client

from domain.models import (
    Exercise,
    ExerciseMuscleGroups,
    ExerciseType,
    MovementPattern,
    MuscleGroupSplit,
    parse_muscle_group,
)

logger = logging.getLogger(__name__)

EXERCISE_COLUMNS = "id, name, type, movement_pattern, description"
SPLIT_COLUMNS = "exercise, muscle_group, split"


def row_to_exercise(row: Dict[str, Any]) -> Exercise:
    """Convert an exercises row to an Exercise. Raises ValueError on unknown enums."""
    return Exercise(
        id=str(row["id"]),
        name=row["name"],
        type=ExerciseType(row["type"]),
        movement_pattern=MovementPattern(row["movement_pattern"]),
        description=row.get("description"),
    )


def rows_to_splits(rows: Iterable[Dict[str, Any]]) -> Dict[str, List[MuscleGroupSplit]]:
    """Group exercise_muscle_groups rows by exercise id, skipping unknown muscle groups."""
    splits: Dict[str, List[MuscleGroupSplit]] = defaultdict(list)
    for row in rows:
        try:
            muscle_group = parse_muscle_group(row.get("muscle_group") or "")
        except ValueError as e:
            logger.warning(f"Skipping split for exercise {row.get('exercise')}: {e}")
            continue
        splits[str(row["exercise"])].append(
            MuscleGroupSplit(muscle_group=muscle_group, split=float(row.get("split") or 0))
        )
    return splits


class SupabaseExerciseCatalogRepository:
    """
    Supabase implementation of ExerciseCatalogRepository protocol.

    Catalog order is exercise name, then id.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_all(self) -> List[ExerciseMuscleGroups]:
        try:
            exercises = self._client.table("exercises") \
                .select(EXERCISE_COLUMNS) \
                .is_("deleted_at", "null") \
                .order("name") \
                .order("id") \
                .execute()
            splits = self._client.table("exercise_muscle_groups") \
                .select(SPLIT_COLUMNS) \
                .is_("deleted_at", "null") \
                .execute()
        except Exception:
            logger.exception("Error fetching exercise catalog")
            raise

        return self._build(exercises.data or [], splits.data or [])

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseMuscleGroups]:
        entries = self.get_many([exercise_id])
        return entries[0] if entries else None

    def get_many(self, exercise_ids: Sequence[str]) -> List[ExerciseMuscleGroups]:
        """
        Get catalog entries for the given ids, in the order of ``exercise_ids``.

        Unknown or invalid exercises are left out.
        """
        ids = list(dict.fromkeys(exercise_ids))
        if not ids:
            return []

        try:
            exercises = self._client.table("exercises") \
                .select(EXERCISE_COLUMNS) \
                .in_("id", ids) \
                .is_("deleted_at", "null") \
                .execute()
            splits = self._client.table("exercise_muscle_groups") \
                .select(SPLIT_COLUMNS) \
                .in_("exercise", ids) \
                .is_("deleted_at", "null") \
                .execute()
        except Exception:
            logger.exception(f"Error fetching exercises {ids}")
            raise

        by_id = {
            entry.exercise.id: entry
            for entry in self._build(exercises.data or [], splits.data or [])
        }
        return [by_id[i] for i in ids if i in by_id]

    def _build(
        self,
        exercise_rows: List[Dict[str, Any]],
        split_rows: List[Dict[str, Any]],
    ) -> List[ExerciseMuscleGroups]:
        splits_by_exercise = rows_to_splits(split_rows)
        entries = []
        for row in exercise_rows:
            try:
                exercise = row_to_exercise(row)
                entries.append(
                    ExerciseMuscleGroups(
                        exercise=exercise,
                        muscle_group_splits=splits_by_exercise.get(exercise.id, []),
                    )
                )
            except (KeyError, ValueError, ValidationError) as e:
                logger.warning(f"Skipping invalid exercise {row.get('id')}: {e}")
        return entries
